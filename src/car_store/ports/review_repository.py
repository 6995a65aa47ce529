from __future__ import annotations

from abc import ABC, abstractmethod

from car_store.domain.review import CarReviews, NewReview, Review, ReviewUpdate


class ReviewRepository(ABC):
    """
    Port for car reviews.

    Mutations are ownership-gated by filter: the acting user id is part of
    the match condition, so a review owned by someone else behaves exactly
    like a missing one.
    """

    @abstractmethod
    def create_review(self, review: NewReview) -> Review:
        """Store a pre-validated review, assigning id and timestamps."""
        ...

    @abstractmethod
    def get_car_reviews(self, car_id: str) -> CarReviews:
        """Reviews of a car sorted by created_at descending, with average and count."""
        ...

    @abstractmethod
    def update_review(self, review_id: str, user_id: str, changes: ReviewUpdate) -> bool:
        """Returns False if no review matches both review_id and user_id."""
        ...

    @abstractmethod
    def delete_review(self, review_id: str, user_id: str) -> bool:
        """Returns False if no review matches both review_id and user_id."""
        ...

    @abstractmethod
    def get_review_by_id(self, review_id: str) -> Review | None: ...
