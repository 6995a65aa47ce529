from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from car_store.domain.errors import ValidationError

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating: int) -> None:
    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}", field="rating"
        )


@dataclass(frozen=True)
class Review:
    id: str
    car_id: str
    user_id: str
    username: str
    rating: int
    comment: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class NewReview:
    car_id: str
    user_id: str
    username: str
    rating: int
    comment: str = ""

    def validate(self) -> None:
        validate_rating(self.rating)


@dataclass(frozen=True, slots=True)
class ReviewUpdate:
    rating: int
    comment: str = ""

    def validate(self) -> None:
        validate_rating(self.rating)


@dataclass(frozen=True)
class CarReviews:
    """Reviews of one car, newest first, with the rating aggregate."""

    reviews: list[Review] = field(default_factory=list)
    average_rating: float = 0.0
    total_reviews: int = 0

    @classmethod
    def from_reviews(cls, reviews: list[Review]) -> CarReviews:
        """Aggregate already-sorted reviews. An empty list averages to 0.0."""
        total = len(reviews)
        average = sum(review.rating for review in reviews) / total if total else 0.0
        return cls(reviews=reviews, average_rating=average, total_reviews=total)
