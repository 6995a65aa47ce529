from __future__ import annotations

from dataclasses import replace

from car_store.adapters.read_write_lock import ReadWriteLock
from car_store.domain.clock import Clock, utc_now
from car_store.domain.identifiers import new_id
from car_store.domain.review import CarReviews, NewReview, Review, ReviewUpdate
from car_store.ports.review_repository import ReviewRepository


class InMemoryReviewRepository(ReviewRepository):
    def __init__(self, clock: Clock = utc_now) -> None:
        self._reviews: dict[str, Review] = {}
        self._clock = clock
        self._lock = ReadWriteLock()

    def create_review(self, review: NewReview) -> Review:
        now = self._clock()
        stored = Review(
            id=new_id(),
            car_id=review.car_id,
            user_id=review.user_id,
            username=review.username,
            rating=review.rating,
            comment=review.comment,
            created_at=now,
            updated_at=now,
        )
        with self._lock.write():
            self._reviews[stored.id] = stored
        return stored

    def get_car_reviews(self, car_id: str) -> CarReviews:
        with self._lock.read():
            reviews = [review for review in self._reviews.values() if review.car_id == car_id]
        # Stable sort: equal timestamps keep insertion order reversed
        reviews.reverse()
        reviews.sort(key=lambda review: review.created_at, reverse=True)
        return CarReviews.from_reviews(reviews)

    def update_review(self, review_id: str, user_id: str, changes: ReviewUpdate) -> bool:
        with self._lock.write():
            review = self._owned(review_id, user_id)
            if review is None:
                return False
            self._reviews[review_id] = replace(
                review,
                rating=changes.rating,
                comment=changes.comment,
                updated_at=self._clock(),
            )
            return True

    def delete_review(self, review_id: str, user_id: str) -> bool:
        with self._lock.write():
            if self._owned(review_id, user_id) is None:
                return False
            del self._reviews[review_id]
            return True

    def get_review_by_id(self, review_id: str) -> Review | None:
        with self._lock.read():
            return self._reviews.get(review_id)

    def _owned(self, review_id: str, user_id: str) -> Review | None:
        review = self._reviews.get(review_id)
        if review is None or review.user_id != user_id:
            return None
        return review
