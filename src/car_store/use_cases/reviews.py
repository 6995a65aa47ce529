"""Review use cases."""

from __future__ import annotations

from dataclasses import dataclass

from car_store.domain.errors import NotFoundError, ValidationError
from car_store.domain.identifiers import parse_id
from car_store.domain.review import CarReviews, NewReview, Review, ReviewUpdate, validate_rating
from car_store.ports.review_repository import ReviewRepository
from car_store.ports.user_repository import UserRepository

# Same outcome for a missing review and someone else's review
REVIEW_NOT_FOUND = "Review not found or you don't have permission"


@dataclass(frozen=True, slots=True)
class CreateReviewRequest:
    user_id: str
    rating: int
    comment: str = ""
    path_car_id: str | None = None
    body_car_id: str | None = None


class CreateReview:
    """
    Attach a review to a car.

    The car id may arrive in the URL (path or query) or in the body; the URL
    wins when both are present. The reviewer's username is copied onto the
    review for display.
    """

    def __init__(
        self, review_repository: ReviewRepository, user_repository: UserRepository
    ) -> None:
        self._reviews = review_repository
        self._users = user_repository

    def execute(self, request: CreateReviewRequest) -> Review:
        """
        Raises:
            ValidationError: Rating outside 1..5 or unparseable car id
            NotFoundError: The authenticated user no longer exists
        """
        validate_rating(request.rating)
        car_id = parse_id(request.path_car_id or request.body_car_id, "car")

        user = self._users.find_by_id(request.user_id)
        if user is None:
            raise NotFoundError(resource="User")

        review = NewReview(
            car_id=car_id,
            user_id=user.id,
            username=user.username,
            rating=request.rating,
            comment=request.comment,
        )
        return self._reviews.create_review(review)


class GetCarReviews:
    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self, car_id: str | None) -> CarReviews:
        if not car_id:
            raise ValidationError("car_id parameter is required", field="car_id")
        return self._reviews.get_car_reviews(parse_id(car_id, "car"))


class GetReview:
    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self, review_id: str) -> Review:
        review = self._reviews.get_review_by_id(parse_id(review_id, "review"))
        if review is None:
            raise NotFoundError(resource="Review")
        return review


class UpdateReview:
    """Ownership-gated: the acting user must be the review's author."""

    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self, review_id: str, user_id: str, changes: ReviewUpdate) -> None:
        key = parse_id(review_id, "review")
        changes.validate()

        if not self._reviews.update_review(key, user_id, changes):
            raise NotFoundError(resource="Review", message=REVIEW_NOT_FOUND)


class DeleteReview:
    """Ownership-gated: the acting user must be the review's author."""

    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self, review_id: str, user_id: str) -> None:
        if not self._reviews.delete_review(parse_id(review_id, "review"), user_id):
            raise NotFoundError(resource="Review", message=REVIEW_NOT_FOUND)
