"""
Favorites use cases.

user_id always comes from the authenticated identity, never from a payload.
"""

from __future__ import annotations

from car_store.domain.favorite import FavoriteWithCar
from car_store.domain.identifiers import parse_id
from car_store.ports.favorite_repository import FavoriteRepository


class AddToFavorites:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, user_id: str, car_id: str | None) -> None:
        self._favorites.add_to_favorites(user_id, parse_id(car_id, "car"))


class RemoveFromFavorites:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, user_id: str, car_id: str) -> None:
        self._favorites.remove_from_favorites(user_id, parse_id(car_id, "car"))


class ListFavorites:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, user_id: str) -> list[FavoriteWithCar]:
        return self._favorites.get_user_favorites(user_id)


class CountFavorites:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, user_id: str) -> int:
        return self._favorites.get_favorites_count(user_id)


class CheckFavorite:
    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, user_id: str, car_id: str) -> bool:
        return self._favorites.is_favorite(user_id, parse_id(car_id, "car"))
