from __future__ import annotations

from dataclasses import dataclass

from car_store.ports.car_repository import CarRepository
from car_store.ports.favorite_repository import FavoriteRepository
from car_store.ports.review_repository import ReviewRepository
from car_store.ports.user_repository import UserRepository


@dataclass(frozen=True)
class Repositories:
    """The four ports, bound to one unit of work."""

    cars: CarRepository
    users: UserRepository
    favorites: FavoriteRepository
    reviews: ReviewRepository
