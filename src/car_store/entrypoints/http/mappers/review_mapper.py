from __future__ import annotations

from car_store.domain.review import CarReviews, Review, ReviewUpdate
from car_store.entrypoints.http.dtos.reviews import (
    CarReviewsResponseDTO,
    CreateReviewRequestDTO,
    ReviewResponseDTO,
    UpdateReviewRequestDTO,
)
from car_store.use_cases.reviews import CreateReviewRequest


class ReviewMapper:
    """Maps between REST DTOs and domain models for reviews."""

    @staticmethod
    def to_create_request(
        dto: CreateReviewRequestDTO, user_id: str, url_car_id: str | None = None
    ) -> CreateReviewRequest:
        """
        Builds the domain request for a new review.

        Args:
            dto: Request body
            user_id: Authenticated user id
            url_car_id: Car id from the path or query string, preferred over the body
        """
        return CreateReviewRequest(
            user_id=user_id,
            rating=dto.rating,
            comment=dto.comment,
            path_car_id=url_car_id,
            body_car_id=dto.car_id,
        )

    @staticmethod
    def to_review_update(dto: UpdateReviewRequestDTO) -> ReviewUpdate:
        return ReviewUpdate(rating=dto.rating, comment=dto.comment)

    @staticmethod
    def to_review_response(review: Review) -> ReviewResponseDTO:
        return ReviewResponseDTO(
            id=review.id,
            car_id=review.car_id,
            user_id=review.user_id,
            username=review.username,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )

    @staticmethod
    def to_car_reviews_response(result: CarReviews) -> CarReviewsResponseDTO:
        return CarReviewsResponseDTO(
            reviews=[ReviewMapper.to_review_response(review) for review in result.reviews],
            average_rating=result.average_rating,
            total_reviews=result.total_reviews,
        )
