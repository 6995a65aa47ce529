"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to any transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message, safe to show to clients
            **context: Additional context for logging (never sent to clients)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for logging."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed input or a violated business rule.

    Examples:
        - year < 1900
        - rating outside 1..5
        - unparseable identifier

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"


class UnauthorizedError(DomainError):
    """Authentication required or failed.

    Covers missing/invalid/expired tokens and bad credentials.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class NotFoundError(DomainError):
    """Resource not found.

    Also used for ownership mismatches on owned resources, so that
    "not yours" is indistinguishable from "does not exist".

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, message: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "User")
            message: Overrides the default "<resource> not found" message
            **context: Additional context
        """
        super().__init__(message or f"{resource} not found", resource=resource, **context)


class ConflictError(DomainError):
    """Unique constraint conflict.

    Examples:
        - Email already registered
        - Username already taken

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class UpstreamError(DomainError):
    """Storage unavailable, timed out or failed unexpectedly.

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "UPSTREAM_ERROR"
