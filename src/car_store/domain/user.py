from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from car_store.domain.errors import ValidationError

DEFAULT_ROLE = "user"
MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72
TEXT_LIMITS = {
    "username": 50,
    "email": 255,
    "first_name": 100,
    "last_name": 100,
    "phone": 30,
}


def validate_profile_lengths(profile: Registration | ProfileUpdate) -> None:
    for name, limit in TEXT_LIMITS.items():
        if len(getattr(profile, name)) > limit:
            raise ValidationError(f"{name} must be at most {limit} characters", field=name)


@dataclass(frozen=True)
class User:
    id: str
    username: str
    email: str
    password_hash: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    role: str = DEFAULT_ROLE
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class NewUser:
    """A user ready to be stored. The password is already hashed."""

    username: str
    email: str
    password_hash: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    role: str = ""


@dataclass(frozen=True, slots=True)
class Registration:
    username: str
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""

    def validate(self) -> None:
        if not self.email or not self.username or not self.password:
            raise ValidationError("Email, username and password are required")
        validate_profile_lengths(self)
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )
        if len(self.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
                field="password",
            )


@dataclass(frozen=True, slots=True)
class ProfileUpdate:
    username: str
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""

    def validate(self) -> None:
        if not self.email or not self.username:
            raise ValidationError("Email and username are required")
        validate_profile_lengths(self)


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identity carried by a session token."""

    user_id: str
    email: str
    username: str
    role: str
