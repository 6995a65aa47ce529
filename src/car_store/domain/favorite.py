from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from car_store.domain.car import Car


@dataclass(frozen=True)
class Favorite:
    id: str
    user_id: str
    car_id: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class FavoriteWithCar:
    """A favorite joined with the car it points at."""

    favorite: Favorite
    car: Car
