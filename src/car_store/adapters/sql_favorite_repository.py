"""SQLAlchemy implementation of FavoriteRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from car_store.adapters.sql_car_repository import SqlCarRepository
from car_store.domain.clock import Clock, utc_now
from car_store.domain.favorite import Favorite, FavoriteWithCar
from car_store.infra.db.models.car import CarRow
from car_store.infra.db.models.favorite import FavoriteRow
from car_store.infra.db.timeouts import QueryBudget, apply_statement_timeout
from car_store.ports.favorite_repository import FavoriteRepository


class SqlFavoriteRepository(FavoriteRepository):
    """
    Favorites table access.

    - (user_id, car_id) is a unique constraint; a duplicate insert that
      slips past the existence check is treated as already added
    - Listing inner-joins cars, which drops favorites of deleted cars
    """

    def __init__(
        self,
        session: Session,
        budget: QueryBudget | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._session = session
        self._budget = budget or QueryBudget()
        self._clock = clock

    def add_to_favorites(self, user_id: str, car_id: str) -> None:
        if self.is_favorite(user_id, car_id):
            return

        self._session.add(
            FavoriteRow(user_id=UUID(user_id), car_id=UUID(car_id), created_at=self._clock())
        )
        try:
            self._session.flush()
        except IntegrityError:
            # A concurrent request added the same pair first
            self._session.rollback()

    def remove_from_favorites(self, user_id: str, car_id: str) -> None:
        apply_statement_timeout(self._session, self._budget.point)
        self._session.execute(
            delete(FavoriteRow).where(
                FavoriteRow.user_id == UUID(user_id),
                FavoriteRow.car_id == UUID(car_id),
            )
        )

    def get_user_favorites(self, user_id: str) -> list[FavoriteWithCar]:
        apply_statement_timeout(self._session, self._budget.listing)
        query = (
            select(FavoriteRow, CarRow)
            .join(CarRow, CarRow.id == FavoriteRow.car_id)
            .where(FavoriteRow.user_id == UUID(user_id))
            .order_by(FavoriteRow.created_at)
        )
        return [
            FavoriteWithCar(favorite=self._to_domain(fav), car=SqlCarRepository._to_domain(car))
            for fav, car in self._session.execute(query).all()
        ]

    def get_favorites_count(self, user_id: str) -> int:
        apply_statement_timeout(self._session, self._budget.point)
        query = select(func.count()).where(FavoriteRow.user_id == UUID(user_id))
        return self._session.execute(query).scalar() or 0

    def is_favorite(self, user_id: str, car_id: str) -> bool:
        apply_statement_timeout(self._session, self._budget.point)
        query = select(func.count()).where(
            FavoriteRow.user_id == UUID(user_id),
            FavoriteRow.car_id == UUID(car_id),
        )
        return (self._session.execute(query).scalar() or 0) > 0

    @staticmethod
    def _to_domain(row: FavoriteRow) -> Favorite:
        return Favorite(
            id=str(row.id),
            user_id=str(row.user_id),
            car_id=str(row.car_id),
            created_at=row.created_at,
        )
