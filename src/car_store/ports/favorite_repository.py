from __future__ import annotations

from abc import ABC, abstractmethod

from car_store.domain.favorite import FavoriteWithCar


class FavoriteRepository(ABC):
    """
    Port for the user <-> car bookmark relation.

    At most one favorite exists per (user_id, car_id) pair.
    """

    @abstractmethod
    def add_to_favorites(self, user_id: str, car_id: str) -> None:
        """Idempotent: adding an existing pair is a no-op, not an error."""
        ...

    @abstractmethod
    def remove_from_favorites(self, user_id: str, car_id: str) -> None:
        """Removing an absent pair is a no-op, not an error."""
        ...

    @abstractmethod
    def get_user_favorites(self, user_id: str) -> list[FavoriteWithCar]:
        """
        Favorites of a user joined with their cars, oldest first.

        Favorites whose car no longer exists are silently skipped.
        """
        ...

    @abstractmethod
    def get_favorites_count(self, user_id: str) -> int: ...

    @abstractmethod
    def is_favorite(self, user_id: str, car_id: str) -> bool: ...
