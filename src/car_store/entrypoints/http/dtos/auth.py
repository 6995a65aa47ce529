from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequestDTO(BaseModel):
    """Request payload for creating an account."""

    username: str = Field(default="", examples=["jdoe"])
    email: str = Field(default="", examples=["jdoe@example.com"])
    password: str = Field(default="", description="At least 6 characters")
    first_name: str = ""
    last_name: str = ""
    phone: str = ""


class LoginRequestDTO(BaseModel):
    username: str = ""
    password: str = ""

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "jdoe", "password": "secret123"}}
    )


class ProfileUpdateRequestDTO(BaseModel):
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""


class UserResponseDTO(BaseModel):
    """Public view of a user. The password hash is never exposed."""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    phone: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthResponseDTO(BaseModel):
    token: str
    user: UserResponseDTO
