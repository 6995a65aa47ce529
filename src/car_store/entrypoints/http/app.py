import logging
import os
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import Headers
from starlette.middleware.base import RequestResponseEndpoint

from car_store.entrypoints.http.exception_handlers import register_exception_handlers
from car_store.entrypoints.http.routes.auth import router as auth_router
from car_store.entrypoints.http.routes.cars import router as cars_router
from car_store.entrypoints.http.routes.favorites import router as favorites_router
from car_store.entrypoints.http.routes.health import router as health_router
from car_store.entrypoints.http.routes.redirects import router as redirects_router
from car_store.entrypoints.http.routes.reviews import router as reviews_router
from car_store.infra.config import Settings
from car_store.infra.logging_config import configure_logging
from car_store.infra.security.passwords import PasswordHasher
from car_store.infra.security.tokens import TokenService
from car_store.infra.storage import create_storage

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """CORS handling whose accepted preflights carry headers only, no body."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            name: value
            for name, value in response.headers.items()
            if name not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        storage = create_storage(settings)
        app.state.storage = storage
        logger.info("Storage ready", extra={"storage_backend": settings.storage_backend})
        try:
            yield
        finally:
            storage.close()
            logger.info("Storage closed")

    app = FastAPI(
        title="Car Store API",
        description="""
        Used-car marketplace API: catalog, accounts, favorites and reviews.

        ## Features
        - Browse and filter the car catalog
        - Register, sign in and manage your profile
        - Bookmark cars as favorites
        - Rate and review cars

        ## Authentication
        Protected endpoints expect `Authorization: Bearer <token>`, using the
        token returned by register or login.

        ## Error Handling
        All errors return `{"error": "<message>"}`.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        redirect_slashes=False,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        secret=settings.jwt_secret,
        ttl=timedelta(minutes=settings.token_ttl_minutes),
    )

    @app.middleware("http")
    async def answer_options(request: Request, call_next: RequestResponseEndpoint) -> Response:
        # OPTIONS without a CORS preflight still gets an empty 200
        if request.method == "OPTIONS":
            return Response(status_code=200)
        return await call_next(request)

    # Added last so it wraps answer_options
    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(redirects_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(cars_router, prefix=API_PREFIX)
    app.include_router(favorites_router, prefix=API_PREFIX)
    app.include_router(reviews_router, prefix=API_PREFIX)

    # Front-end bundle catches every path the API does not
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = build_app()
