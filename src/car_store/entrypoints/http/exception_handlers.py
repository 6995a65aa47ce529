"""FastAPI exception handlers.

Translates domain errors, request validation failures and framework HTTP
errors into the `{"error": "<message>"}` envelope.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from car_store.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UPSTREAM_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _envelope(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with automatic HTTP status code mapping.

    Maps domain errors to HTTP status codes:
    - VALIDATION_ERROR → 400 Bad Request
    - UNAUTHORIZED → 401 Unauthorized
    - NOT_FOUND → 404 Not Found
    - CONFLICT → 409 Conflict
    - UPSTREAM_ERROR → 500 Internal Server Error
    - Other → 400 Bad Request

    Server-side failures are answered with a generic message; their details
    only go to the log.
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            exc_info=exc,
            extra={
                "error": exc.to_dict(),
                "error_message": exc.message,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return _envelope(status_code, INTERNAL_ERROR_MESSAGE)

    logger.info(
        "Client error",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
        },
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return _envelope(status_code, exc.message, headers)


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Condense pydantic errors into one client-facing sentence."""
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"

    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc not in ("body", "query", "path"))
    if not field:
        return "Invalid request body"
    return f"Invalid value for {field}: {first.get('msg', 'invalid')}"


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    Malformed JSON, wrong types (e.g. rating="five"), unparseable query
    values (e.g. min_price=abc). All of them are client errors → 400.
    """
    errors = list(exc.errors())
    message = describe_validation_errors(errors)

    logger.info(
        "Request validation error",
        extra={
            "errors": [
                {"loc": list(error.get("loc", ())), "type": error.get("type")} for error in errors
            ],
            "path": request.url.path,
            "method": request.method,
        },
    )

    return _envelope(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched paths (404) and methods (405) raised by the router."""
    logger.info(
        "HTTP error",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return _envelope(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything not translated above: a bug. Logged with its traceback, answered 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers. Called once by build_app()."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
