"""Catalog use cases."""

from __future__ import annotations

from car_store.domain.car import Car, CarFilters, CarUpdate, NewCar
from car_store.domain.errors import NotFoundError
from car_store.domain.identifiers import parse_id
from car_store.ports.car_repository import CarRepository


class CreateCar:
    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, car: NewCar) -> Car:
        """
        Validate and store a new car.

        Raises:
            ValidationError: If make/model are blank, year < 1900 or price <= 0
        """
        car.validate()
        return self._repository.create(car)


class ListCars:
    """
    Filtered catalog listing.

    Validates filters and delegates filtering to the repository adapter.
    No filtering logic exists in the use case.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, filters: CarFilters) -> list[Car]:
        # Validate inputs (UseCase responsibility per contract)
        filters.validate()
        return self._repository.list(filters)


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Validate car_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if car doesn't exist
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, car_id: str) -> Car:
        """
        Raises:
            ValidationError: If car_id is not a valid UUID format
            NotFoundError: If car with given ID doesn't exist
        """
        car = self._repository.get_by_id(parse_id(car_id, "car"))

        if car is None:
            raise NotFoundError(resource="Car", identifier=car_id)

        return car


class UpdateCar:
    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, car_id: str, changes: CarUpdate) -> None:
        """Apply a partial update (price, mileage, description)."""
        key = parse_id(car_id, "car")
        changes.validate()

        if not self._repository.update(key, changes):
            raise NotFoundError(resource="Car", identifier=car_id)


class DeleteCar:
    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, car_id: str) -> None:
        # Reviews and favorites of the car are left in place
        if not self._repository.delete(parse_id(car_id, "car")):
            raise NotFoundError(resource="Car", identifier=car_id)
