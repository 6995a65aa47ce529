from __future__ import annotations

from car_store.adapters.read_write_lock import ReadWriteLock
from car_store.domain.clock import Clock, utc_now
from car_store.domain.favorite import Favorite, FavoriteWithCar
from car_store.domain.identifiers import new_id
from car_store.ports.car_repository import CarRepository
from car_store.ports.favorite_repository import FavoriteRepository


class InMemoryFavoriteRepository(FavoriteRepository):
    """
    Favorites keyed by (user_id, car_id).

    The car join goes through the CarRepository port, so any car store works.
    """

    def __init__(self, cars: CarRepository, clock: Clock = utc_now) -> None:
        self._cars = cars
        self._favorites: dict[tuple[str, str], Favorite] = {}
        self._clock = clock
        self._lock = ReadWriteLock()

    def add_to_favorites(self, user_id: str, car_id: str) -> None:
        key = (user_id, car_id)
        with self._lock.write():
            if key in self._favorites:
                return
            self._favorites[key] = Favorite(
                id=new_id(), user_id=user_id, car_id=car_id, created_at=self._clock()
            )

    def remove_from_favorites(self, user_id: str, car_id: str) -> None:
        with self._lock.write():
            self._favorites.pop((user_id, car_id), None)

    def get_user_favorites(self, user_id: str) -> list[FavoriteWithCar]:
        with self._lock.read():
            favorites = [fav for fav in self._favorites.values() if fav.user_id == user_id]

        joined = []
        for favorite in favorites:
            car = self._cars.get_by_id(favorite.car_id)
            if car is None:
                continue
            joined.append(FavoriteWithCar(favorite=favorite, car=car))
        return joined

    def get_favorites_count(self, user_id: str) -> int:
        with self._lock.read():
            return sum(1 for fav in self._favorites.values() if fav.user_id == user_id)

    def is_favorite(self, user_id: str, car_id: str) -> bool:
        with self._lock.read():
            return (user_id, car_id) in self._favorites
