"""Tests for the bearer-token auth gate."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from car_store.domain.errors import UnauthorizedError
from car_store.domain.user import TokenClaims
from car_store.entrypoints.http.auth import current_user_id, extract_bearer_token
from car_store.entrypoints.http.exception_handlers import register_exception_handlers
from car_store.infra.security.tokens import TokenService

SECRET = "test-secret-that-is-at-least-32-bytes-long"
CLAIMS = TokenClaims(user_id="u-42", email="jdoe@example.com", username="jdoe", role="user")


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(SECRET, timedelta(hours=1))


@pytest.fixture
def client(token_service: TokenService) -> TestClient:
    """Minimal app exposing one protected route."""
    app = FastAPI()
    register_exception_handlers(app)
    app.state.token_service = token_service

    @app.get("/whoami")
    def whoami(user_id: str = Depends(current_user_id)) -> dict:
        return {"user_id": user_id}

    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# extract_bearer_token
# ==============================================================================


def test_extracts_token() -> None:
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize("header", [None, ""])
def test_missing_header(header: str | None) -> None:
    with pytest.raises(UnauthorizedError, match="Authorization header required"):
        extract_bearer_token(header)


@pytest.mark.parametrize(
    "header", ["Basic dXNlcjpwYXNz", "Bearer", "Bearer ", "bearer abc", "Bearer a b", "abc"]
)
def test_malformed_header(header: str) -> None:
    with pytest.raises(UnauthorizedError, match="Invalid authorization header format"):
        extract_bearer_token(header)


# ==============================================================================
# current_user_id
# ==============================================================================


def test_valid_token_yields_user_id(client: TestClient, token_service: TokenService) -> None:
    token = token_service.issue(CLAIMS)

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {"user_id": "u-42"}


def test_missing_header_is_401(client: TestClient) -> None:
    response = client.get("/whoami")

    assert response.status_code == 401
    assert response.json() == {"error": "Authorization header required"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_token_signed_elsewhere_is_401(client: TestClient) -> None:
    foreign = TokenService("some-other-secret-that-is-32-bytes-long", timedelta(hours=1))

    response = client.get(
        "/whoami", headers={"Authorization": f"Bearer {foreign.issue(CLAIMS)}"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


def test_expired_token_is_401(client: TestClient) -> None:
    past = datetime.now(timezone.utc) - timedelta(days=1)
    expired = TokenService(SECRET, timedelta(hours=1), clock=lambda: past).issue(CLAIMS)

    response = client.get("/whoami", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 401
    assert response.json() == {"error": "Token has expired"}
