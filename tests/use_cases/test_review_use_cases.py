"""Test suite for review use cases."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from car_store.domain.errors import NotFoundError, ValidationError
from car_store.domain.review import CarReviews, NewReview, Review, ReviewUpdate
from car_store.domain.user import User
from car_store.ports.review_repository import ReviewRepository
from car_store.ports.user_repository import UserRepository
from car_store.use_cases.reviews import (
    REVIEW_NOT_FOUND,
    CreateReview,
    CreateReviewRequest,
    DeleteReview,
    GetCarReviews,
    GetReview,
    UpdateReview,
)

PATH_CAR_ID = "550e8400-e29b-41d4-a716-446655440000"
BODY_CAR_ID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
REVIEW_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"


@pytest.fixture()
def reviews() -> Mock:
    return Mock(spec=ReviewRepository)


@pytest.fixture()
def users() -> Mock:
    repo = Mock(spec=UserRepository)
    repo.find_by_id.return_value = User(
        id="u1", username="alice", email="alice@example.com", password_hash="h"
    )
    return repo


# ==============================================================================
# CreateReview
# ==============================================================================


def test_create_copies_username_from_user(reviews: Mock, users: Mock) -> None:
    CreateReview(reviews, users).execute(
        CreateReviewRequest(user_id="u1", rating=4, comment="Nice", body_car_id=BODY_CAR_ID)
    )

    reviews.create_review.assert_called_once_with(
        NewReview(car_id=BODY_CAR_ID, user_id="u1", username="alice", rating=4, comment="Nice")
    )


def test_create_prefers_url_car_id_over_body(reviews: Mock, users: Mock) -> None:
    CreateReview(reviews, users).execute(
        CreateReviewRequest(
            user_id="u1", rating=5, path_car_id=PATH_CAR_ID, body_car_id=BODY_CAR_ID
        )
    )

    created: NewReview = reviews.create_review.call_args.args[0]
    assert created.car_id == PATH_CAR_ID


@pytest.mark.parametrize("rating", [0, 6])
def test_create_rejects_out_of_range_rating_without_storing(
    reviews: Mock, users: Mock, rating: int
) -> None:
    with pytest.raises(ValidationError, match="Rating must be between 1 and 5"):
        CreateReview(reviews, users).execute(
            CreateReviewRequest(user_id="u1", rating=rating, body_car_id=BODY_CAR_ID)
        )

    reviews.create_review.assert_not_called()


def test_create_rejects_missing_car_id(reviews: Mock, users: Mock) -> None:
    with pytest.raises(ValidationError, match="Invalid car ID"):
        CreateReview(reviews, users).execute(CreateReviewRequest(user_id="u1", rating=3))


def test_create_for_vanished_user(reviews: Mock, users: Mock) -> None:
    users.find_by_id.return_value = None

    with pytest.raises(NotFoundError, match="User not found"):
        CreateReview(reviews, users).execute(
            CreateReviewRequest(user_id="u1", rating=3, body_car_id=BODY_CAR_ID)
        )


# ==============================================================================
# Reads
# ==============================================================================


def test_get_car_reviews(reviews: Mock) -> None:
    reviews.get_car_reviews.return_value = CarReviews()

    assert GetCarReviews(reviews).execute(PATH_CAR_ID) == CarReviews()
    reviews.get_car_reviews.assert_called_once_with(PATH_CAR_ID)


def test_get_car_reviews_requires_car_id(reviews: Mock) -> None:
    with pytest.raises(ValidationError, match="car_id parameter is required"):
        GetCarReviews(reviews).execute(None)

    reviews.get_car_reviews.assert_not_called()


def test_get_car_reviews_rejects_malformed_car_id(reviews: Mock) -> None:
    with pytest.raises(ValidationError, match="Invalid car ID"):
        GetCarReviews(reviews).execute("not-an-id")


def test_get_review(reviews: Mock) -> None:
    stored = Review(id=REVIEW_ID, car_id=PATH_CAR_ID, user_id="u1", username="alice", rating=4)
    reviews.get_review_by_id.return_value = stored

    assert GetReview(reviews).execute(REVIEW_ID) == stored


def test_get_missing_review(reviews: Mock) -> None:
    reviews.get_review_by_id.return_value = None

    with pytest.raises(NotFoundError, match="Review not found"):
        GetReview(reviews).execute(REVIEW_ID)


# ==============================================================================
# Ownership-gated mutations
# ==============================================================================


def test_update_passes_acting_user(reviews: Mock) -> None:
    reviews.update_review.return_value = True
    changes = ReviewUpdate(rating=2, comment="Changed my mind")

    UpdateReview(reviews).execute(REVIEW_ID, "u1", changes)

    reviews.update_review.assert_called_once_with(REVIEW_ID, "u1", changes)


def test_update_not_owned_raises_not_found(reviews: Mock) -> None:
    reviews.update_review.return_value = False

    with pytest.raises(NotFoundError) as exc_info:
        UpdateReview(reviews).execute(REVIEW_ID, "u2", ReviewUpdate(rating=2))

    assert exc_info.value.message == REVIEW_NOT_FOUND


def test_update_rejects_bad_rating(reviews: Mock) -> None:
    with pytest.raises(ValidationError):
        UpdateReview(reviews).execute(REVIEW_ID, "u1", ReviewUpdate(rating=9))

    reviews.update_review.assert_not_called()


def test_delete_not_owned_raises_not_found(reviews: Mock) -> None:
    reviews.delete_review.return_value = False

    with pytest.raises(NotFoundError) as exc_info:
        DeleteReview(reviews).execute(REVIEW_ID, "u2")

    assert exc_info.value.message == REVIEW_NOT_FOUND
