from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_store.entrypoints.http.app import build_app
from car_store.infra.config import Settings

TEST_SECRET = "test-secret-that-is-at-least-32-bytes-long"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """In-memory storage, cheap bcrypt, no static bundle."""
    return Settings(
        storage_backend="memory",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        static_dir=str(tmp_path / "missing-static"),
        log_level="WARNING",
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    return build_app(settings)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with the app lifespan running (storage is created on startup)."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture()
def register_user(client: TestClient) -> Callable[..., dict]:
    """Register a user and return the auth response body."""

    def register(username: str = "jdoe", password: str = "secret123", **extra: str) -> dict:
        payload = {
            "username": username,
            "email": extra.pop("email", f"{username}@example.com"),
            "password": password,
            **extra,
        }
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return register


@pytest.fixture()
def auth_headers(register_user: Callable[..., dict]) -> dict[str, str]:
    return {"Authorization": f"Bearer {register_user()['token']}"}


@pytest.fixture()
def create_car(client: TestClient, auth_headers: dict[str, str]) -> Callable[..., dict]:
    """Create a car through the API and return its JSON."""

    def create(**overrides: object) -> dict:
        payload = {"make": "Toyota", "model": "Camry", "year": 2020, "price": "25000.00"}
        payload.update(overrides)
        response = client.post("/api/cars", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return create
