"""Registration, login and profile use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from car_store.domain.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from car_store.domain.user import (
    DEFAULT_ROLE,
    NewUser,
    ProfileUpdate,
    Registration,
    TokenClaims,
    User,
)
from car_store.infra.security.passwords import PasswordHasher
from car_store.infra.security.tokens import TokenService
from car_store.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True, slots=True)
class AuthResult:
    token: str
    user: User


def _issue_token(tokens: TokenService, user: User) -> str:
    return tokens.issue(
        TokenClaims(user_id=user.id, email=user.email, username=user.username, role=user.role)
    )


class RegisterUser:
    """
    Create an account and sign the user in.

    Email and username are pre-checked to give a precise conflict message;
    the storage constraint still has the final word under concurrent sign-ups.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher
        self._tokens = token_service

    def execute(self, registration: Registration) -> AuthResult:
        """
        Raises:
            ValidationError: Missing fields or a password shorter than 6 characters
            ConflictError: Email or username already in use
        """
        registration.validate()

        if self._users.find_by_email(registration.email) is not None:
            raise ConflictError("Email already registered")
        if self._users.find_by_username(registration.username) is not None:
            raise ConflictError("Username already taken")

        user = self._users.create(
            NewUser(
                username=registration.username,
                email=registration.email,
                password_hash=self._hasher.hash(registration.password),
                first_name=registration.first_name,
                last_name=registration.last_name,
                phone=registration.phone,
                role=DEFAULT_ROLE,
            )
        )
        logger.info("User registered", extra={"user_id": user.id})

        return AuthResult(token=_issue_token(self._tokens, user), user=user)


class LoginUser:
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher
        self._tokens = token_service

    def execute(self, username: str, password: str) -> AuthResult:
        """
        Authenticate by username and password.

        Unknown usernames and wrong passwords fail with the same message.
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        user = self._users.find_by_username(username)
        if user is None or not self._hasher.verify(password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS)

        return AuthResult(token=_issue_token(self._tokens, user), user=user)


class GetProfile:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise NotFoundError(resource="User")
        return user


class UpdateProfile:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str, profile: ProfileUpdate) -> User:
        profile.validate()

        owner = self._users.find_by_email(profile.email)
        if owner is not None and owner.id != user_id:
            raise ConflictError("Email already registered")
        owner = self._users.find_by_username(profile.username)
        if owner is not None and owner.id != user_id:
            raise ConflictError("Username already taken")

        if not self._users.update(user_id, profile):
            raise NotFoundError(resource="User")

        updated = self._users.find_by_id(user_id)
        if updated is None:
            raise NotFoundError(resource="User")
        return updated
