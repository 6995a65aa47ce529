"""
Auth gate for protected routes.

`authenticate` extracts and validates the bearer token and stores the
user id on `request.state`; `current_user_id` is what routes depend on.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from car_store.domain.errors import UnauthorizedError
from car_store.infra.security.tokens import TokenService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def extract_bearer_token(header: str | None) -> str:
    """
    Raises:
        UnauthorizedError: Header absent or not of the form `Bearer <token>`
    """
    if not header:
        raise UnauthorizedError("Authorization header required")

    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme != BEARER_SCHEME or not token or " " in token:
        raise UnauthorizedError("Invalid authorization header format")
    return token


def authenticate(request: Request) -> None:
    token = extract_bearer_token(request.headers.get("Authorization"))
    token_service: TokenService = request.app.state.token_service

    claims = token_service.validate(token)
    request.state.user_id = claims.user_id
    request.state.username = claims.username
    logger.debug("Request authenticated", extra={"user_id": claims.user_id})


def current_user_id(request: Request, _: None = Depends(authenticate)) -> str:
    """Authenticated user id. Never taken from the request body."""
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise UnauthorizedError("User not authenticated")
    return user_id
