from __future__ import annotations

from dataclasses import replace

from car_store.adapters.read_write_lock import ReadWriteLock
from car_store.domain.car import Car, CarFilters, CarUpdate, NewCar
from car_store.domain.clock import Clock, utc_now
from car_store.domain.identifiers import new_id
from car_store.ports.car_repository import CarRepository


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order
    - Applies AND-semantics filtering (case-insensitive equality, inclusive ranges)
    - Safe for concurrent use (readers-writer lock)
    """

    def __init__(self, cars: list[Car] | None = None, clock: Clock = utc_now) -> None:
        self._cars: dict[str, Car] = {car.id: car for car in cars or []}
        self._clock = clock
        self._lock = ReadWriteLock()

    def create(self, car: NewCar) -> Car:
        now = self._clock()
        stored = Car(
            id=new_id(),
            make=car.make,
            model=car.model,
            year=car.year,
            price=car.price,
            mileage=car.mileage,
            body_type=car.body_type,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            color=car.color,
            horsepower=car.horsepower,
            engine_size=car.engine_size,
            description=car.description,
            image_url=car.image_url,
            created_at=now,
            updated_at=now,
        )
        with self._lock.write():
            self._cars[stored.id] = stored
        return stored

    def get_by_id(self, car_id: str) -> Car | None:
        with self._lock.read():
            return self._cars.get(car_id)

    def list(self, filters: CarFilters) -> list[Car]:
        # Filters arrive validated by ListCars
        with self._lock.read():
            return [car for car in self._cars.values() if self._matches(car, filters)]

    def update(self, car_id: str, changes: CarUpdate) -> bool:
        with self._lock.write():
            car = self._cars.get(car_id)
            if car is None:
                return False
            self._cars[car_id] = replace(
                car,
                price=changes.price if changes.price is not None else car.price,
                mileage=changes.mileage if changes.mileage is not None else car.mileage,
                description=(
                    changes.description if changes.description is not None else car.description
                ),
                updated_at=self._clock(),
            )
            return True

    def delete(self, car_id: str) -> bool:
        with self._lock.write():
            return self._cars.pop(car_id, None) is not None

    def _matches(self, car: Car, filters: CarFilters) -> bool:
        if filters.make and car.make.lower() != filters.make.lower():
            return False
        if filters.body_type and car.body_type.lower() != filters.body_type.lower():
            return False
        if filters.fuel_type and car.fuel_type.lower() != filters.fuel_type.lower():
            return False
        if filters.transmission and car.transmission.lower() != filters.transmission.lower():
            return False
        if filters.year_min is not None and car.year < filters.year_min:
            return False
        if filters.year_max is not None and car.year > filters.year_max:
            return False
        if filters.price_min is not None and car.price < filters.price_min:
            return False
        if filters.price_max is not None and car.price > filters.price_max:
            return False
        return True
