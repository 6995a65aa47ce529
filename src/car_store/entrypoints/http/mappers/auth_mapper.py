from __future__ import annotations

from car_store.domain.user import ProfileUpdate, Registration, User
from car_store.entrypoints.http.dtos.auth import (
    AuthResponseDTO,
    ProfileUpdateRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from car_store.use_cases.auth import AuthResult


class AuthMapper:
    """Maps between REST DTOs and domain models for accounts."""

    @staticmethod
    def to_registration(dto: RegisterRequestDTO) -> Registration:
        return Registration(
            username=dto.username.strip(),
            email=dto.email.strip(),
            password=dto.password,
            first_name=dto.first_name,
            last_name=dto.last_name,
            phone=dto.phone,
        )

    @staticmethod
    def to_profile_update(dto: ProfileUpdateRequestDTO) -> ProfileUpdate:
        return ProfileUpdate(
            username=dto.username.strip(),
            email=dto.email.strip(),
            first_name=dto.first_name,
            last_name=dto.last_name,
            phone=dto.phone,
        )

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        """Public projection of a user: the password hash is dropped here."""
        return UserResponseDTO(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_auth_response(result: AuthResult) -> AuthResponseDTO:
        return AuthResponseDTO(
            token=result.token, user=AuthMapper.to_user_response(result.user)
        )
