"""
Dependency injection for FastAPI routes.

Key principle: repositories are bound to one unit of work per request.
Process-wide services (storage, password hasher, token service) are built
once in the app lifespan and read from `app.state`.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request

from car_store.infra.security.passwords import PasswordHasher
from car_store.infra.security.tokens import TokenService
from car_store.infra.storage import Storage
from car_store.ports.repositories import Repositories
from car_store.use_cases.auth import GetProfile, LoginUser, RegisterUser, UpdateProfile
from car_store.use_cases.cars import CreateCar, DeleteCar, GetCarById, ListCars, UpdateCar
from car_store.use_cases.favorites import (
    AddToFavorites,
    CheckFavorite,
    CountFavorites,
    ListFavorites,
    RemoveFromFavorites,
)
from car_store.use_cases.reviews import (
    CreateReview,
    DeleteReview,
    GetCarReviews,
    GetReview,
    UpdateReview,
)


def get_repositories(request: Request) -> Generator[Repositories, None, None]:
    """
    Provides the repositories for a single request.

    For SQL storage this wraps one session: committed when the endpoint
    returns, rolled back when it raises, closed in both cases. FastAPI
    caches the dependency, so every use case of a request shares it.

    Factories depend on it with `scope="function"` so the commit happens
    before the response is sent; a failed commit becomes a 500 instead of
    a success answer for data that was never stored.

    Yields:
        Repositories: Repository bundle bound to the request's unit of work
    """
    storage: Storage = request.app.state.storage
    with storage.repositories() as repositories:
        yield repositories


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


# ==============================================================================
# Auth
# ==============================================================================


def get_register_user_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> RegisterUser:
    return RegisterUser(
        user_repository=repositories.users,
        password_hasher=password_hasher,
        token_service=token_service,
    )


def get_login_user_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> LoginUser:
    return LoginUser(
        user_repository=repositories.users,
        password_hasher=password_hasher,
        token_service=token_service,
    )


def get_profile_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> GetProfile:
    return GetProfile(user_repository=repositories.users)


def get_update_profile_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> UpdateProfile:
    return UpdateProfile(user_repository=repositories.users)


# ==============================================================================
# Cars
# ==============================================================================


def get_list_cars_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> ListCars:
    return ListCars(car_repository=repositories.cars)


def get_create_car_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> CreateCar:
    return CreateCar(car_repository=repositories.cars)


def get_car_by_id_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> GetCarById:
    return GetCarById(car_repository=repositories.cars)


def get_update_car_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> UpdateCar:
    return UpdateCar(car_repository=repositories.cars)


def get_delete_car_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> DeleteCar:
    return DeleteCar(car_repository=repositories.cars)


# ==============================================================================
# Favorites
# ==============================================================================


def get_add_favorite_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> AddToFavorites:
    return AddToFavorites(favorite_repository=repositories.favorites)


def get_remove_favorite_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> RemoveFromFavorites:
    return RemoveFromFavorites(favorite_repository=repositories.favorites)


def get_list_favorites_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> ListFavorites:
    return ListFavorites(favorite_repository=repositories.favorites)


def get_count_favorites_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> CountFavorites:
    return CountFavorites(favorite_repository=repositories.favorites)


def get_check_favorite_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> CheckFavorite:
    return CheckFavorite(favorite_repository=repositories.favorites)


# ==============================================================================
# Reviews
# ==============================================================================


def get_create_review_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> CreateReview:
    return CreateReview(
        review_repository=repositories.reviews, user_repository=repositories.users
    )


def get_car_reviews_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> GetCarReviews:
    return GetCarReviews(review_repository=repositories.reviews)


def get_review_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> GetReview:
    return GetReview(review_repository=repositories.reviews)


def get_update_review_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> UpdateReview:
    return UpdateReview(review_repository=repositories.reviews)


def get_delete_review_use_case(
    repositories: Repositories = Depends(get_repositories, scope="function"),
) -> DeleteReview:
    return DeleteReview(review_repository=repositories.reviews)
