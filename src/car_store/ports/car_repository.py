from __future__ import annotations

from abc import ABC, abstractmethod

from car_store.domain.car import Car, CarFilters, CarUpdate, NewCar


class CarRepository(ABC):
    """
    Port for catalog data access.

    Contract (Preconditions):
        - identifiers are canonical UUID strings (parsed by the caller)
        - NewCar, CarUpdate and CarFilters are pre-validated by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def create(self, car: NewCar) -> Car:
        """Store a car, assigning id and created/updated timestamps."""
        ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None:
        """Return the car, or None if no car has this id."""
        ...

    @abstractmethod
    def list(self, filters: CarFilters) -> list[Car]:
        """
        List cars matching filters.

        Absent filter fields impose no constraint; present fields AND together.
        Equality filters are exact, ranges are inclusive.
        """
        ...

    @abstractmethod
    def update(self, car_id: str, changes: CarUpdate) -> bool:
        """
        Apply the non-None fields of changes and refresh updated_at.

        Returns:
            False if no car has this id
        """
        ...

    @abstractmethod
    def delete(self, car_id: str) -> bool:
        """Delete a car. Returns False if no car has this id."""
        ...
