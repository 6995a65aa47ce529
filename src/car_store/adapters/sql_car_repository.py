"""SQLAlchemy implementation of CarRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from car_store.domain.car import Car, CarFilters, CarUpdate, NewCar
from car_store.domain.clock import Clock, utc_now
from car_store.infra.db.models.car import CarRow
from car_store.infra.db.timeouts import QueryBudget, apply_statement_timeout
from car_store.ports.car_repository import CarRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


def as_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:  # Invalid UUID format
        return None


class SqlCarRepository(CarRepository):
    """
    SQLAlchemy implementation of CarRepository (PostgreSQL in production).

    - Applies filters using SQL WHERE clauses
    - Converts CarRow (infrastructure) to Car (domain)
    - Bounds every call with a statement timeout
    """

    def __init__(
        self,
        session: Session,
        budget: QueryBudget | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
            budget: Statement timeouts for point and list operations
            clock: Source of created/updated timestamps
        """
        self._session = session
        self._budget = budget or QueryBudget()
        self._clock = clock

    def create(self, car: NewCar) -> Car:
        apply_statement_timeout(self._session, self._budget.point)
        now = self._clock()
        row = CarRow(
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
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Returns:
            Car entity if found, None otherwise (including malformed ids)
        """
        row = self._get_row(car_id)
        return self._to_domain(row) if row else None

    def list(self, filters: CarFilters) -> list[Car]:
        # Filters arrive validated by ListCars
        apply_statement_timeout(self._session, self._budget.listing)
        query = self._build_query(filters).order_by(CarRow.created_at)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def update(self, car_id: str, changes: CarUpdate) -> bool:
        row = self._get_row(car_id)
        if row is None:
            return False

        if changes.price is not None:
            row.price = changes.price
        if changes.mileage is not None:
            row.mileage = changes.mileage
        if changes.description is not None:
            row.description = changes.description
        row.updated_at = self._clock()

        self._session.flush()
        return True

    def delete(self, car_id: str) -> bool:
        row = self._get_row(car_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _get_row(self, car_id: str) -> CarRow | None:
        key = as_uuid(car_id)
        if key is None:
            return None
        apply_statement_timeout(self._session, self._budget.point)
        return self._session.get(CarRow, key)

    def _build_query(self, filters: CarFilters) -> Select[tuple[CarRow]]:
        """
        Build SQLAlchemy query with filters applied.

        Args:
            filters: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(CarRow)

        # Case-insensitive exact matches
        if filters.make:
            query = query.where(func.lower(CarRow.make) == filters.make.lower())
        if filters.body_type:
            query = query.where(func.lower(CarRow.body_type) == filters.body_type.lower())
        if filters.fuel_type:
            query = query.where(func.lower(CarRow.fuel_type) == filters.fuel_type.lower())
        if filters.transmission:
            query = query.where(
                func.lower(CarRow.transmission) == filters.transmission.lower()
            )

        # Year range filters (inclusive)
        if filters.year_min is not None:
            query = query.where(CarRow.year >= filters.year_min)
        if filters.year_max is not None:
            query = query.where(CarRow.year <= filters.year_max)

        # Price range filters (inclusive)
        if filters.price_min is not None:
            query = query.where(CarRow.price >= filters.price_min)
        if filters.price_max is not None:
            query = query.where(CarRow.price <= filters.price_max)

        return query

    @staticmethod
    def _to_domain(row: CarRow) -> Car:
        """Convert database model (CarRow) to domain entity (Car)."""
        return Car(
            id=str(row.id),  # Convert UUID to string
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
            mileage=row.mileage,
            body_type=row.body_type,
            fuel_type=row.fuel_type,
            transmission=row.transmission,
            color=row.color,
            horsepower=row.horsepower,
            engine_size=row.engine_size,
            description=row.description,
            image_url=row.image_url,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
