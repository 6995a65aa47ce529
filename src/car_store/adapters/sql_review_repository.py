"""SQLAlchemy implementation of ReviewRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from car_store.adapters.sql_car_repository import as_uuid
from car_store.domain.clock import Clock, utc_now
from car_store.domain.review import CarReviews, NewReview, Review, ReviewUpdate
from car_store.infra.db.models.review import ReviewRow
from car_store.infra.db.timeouts import QueryBudget, apply_statement_timeout
from car_store.ports.review_repository import ReviewRepository


class SqlReviewRepository(ReviewRepository):
    """
    Reviews table access.

    Update and delete put user_id in the WHERE clause next to the review id;
    the affected row count is the only success signal.
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

    def create_review(self, review: NewReview) -> Review:
        apply_statement_timeout(self._session, self._budget.point)
        now = self._clock()
        row = ReviewRow(
            car_id=UUID(review.car_id),
            user_id=UUID(review.user_id),
            username=review.username,
            rating=review.rating,
            comment=review.comment,
            created_at=now,
            updated_at=now,
        )
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def get_car_reviews(self, car_id: str) -> CarReviews:
        apply_statement_timeout(self._session, self._budget.listing)
        query = (
            select(ReviewRow)
            .where(ReviewRow.car_id == UUID(car_id))
            .order_by(ReviewRow.created_at.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return CarReviews.from_reviews([self._to_domain(row) for row in rows])

    def update_review(self, review_id: str, user_id: str, changes: ReviewUpdate) -> bool:
        apply_statement_timeout(self._session, self._budget.point)
        result = self._session.execute(
            update(ReviewRow)
            .where(ReviewRow.id == UUID(review_id), ReviewRow.user_id == UUID(user_id))
            .values(rating=changes.rating, comment=changes.comment, updated_at=self._clock())
        )
        return result.rowcount > 0

    def delete_review(self, review_id: str, user_id: str) -> bool:
        apply_statement_timeout(self._session, self._budget.point)
        result = self._session.execute(
            delete(ReviewRow)
            .where(ReviewRow.id == UUID(review_id), ReviewRow.user_id == UUID(user_id))
        )
        return result.rowcount > 0

    def get_review_by_id(self, review_id: str) -> Review | None:
        key = as_uuid(review_id)
        if key is None:
            return None
        apply_statement_timeout(self._session, self._budget.point)
        row = self._session.get(ReviewRow, key)
        return self._to_domain(row) if row else None

    @staticmethod
    def _to_domain(row: ReviewRow) -> Review:
        return Review(
            id=str(row.id),
            car_id=str(row.car_id),
            user_id=str(row.user_id),
            username=row.username,
            rating=row.rating,
            comment=row.comment,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
