from fastapi import APIRouter, Depends, Query, status

from car_store.entrypoints.http.auth import current_user_id
from car_store.entrypoints.http.dependencies import (
    get_car_reviews_use_case,
    get_create_review_use_case,
    get_delete_review_use_case,
    get_review_use_case,
    get_update_review_use_case,
)
from car_store.entrypoints.http.dtos.reviews import (
    CarReviewsResponseDTO,
    CreateReviewRequestDTO,
    ReviewResponseDTO,
    UpdateReviewRequestDTO,
)
from car_store.entrypoints.http.error_responses import MessageResponse, error_responses
from car_store.entrypoints.http.mappers.review_mapper import ReviewMapper
from car_store.use_cases.reviews import (
    CreateReview,
    DeleteReview,
    GetCarReviews,
    GetReview,
    UpdateReview,
)


router = APIRouter(tags=["Reviews"])

CAR_REVIEWS_DESCRIPTION = """
Reviews of one car, newest first, with the average rating.

The average is 0.0 and the total 0 when the car has no reviews.
"""

CREATE_REVIEW_DESCRIPTION = """
Rate a car from 1 to 5 with an optional comment.

The car id is taken from the URL when present, otherwise from the body's
`car_id`.
"""


@router.get(
    "/reviews",
    response_model=CarReviewsResponseDTO,
    summary="List reviews of a car",
    description=CAR_REVIEWS_DESCRIPTION,
    responses=error_responses(400),
)
def list_reviews(
    car_id: str | None = Query(default=None, description="Car to list reviews for"),
    use_case: GetCarReviews = Depends(get_car_reviews_use_case),
) -> CarReviewsResponseDTO:
    return ReviewMapper.to_car_reviews_response(use_case.execute(car_id))


@router.post(
    "/reviews",
    response_model=ReviewResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Review a car",
    description=CREATE_REVIEW_DESCRIPTION,
    responses=error_responses(400, 401, 404),
)
def create_review(
    body: CreateReviewRequestDTO,
    car_id: str | None = Query(default=None),
    user_id: str = Depends(current_user_id),
    use_case: CreateReview = Depends(get_create_review_use_case),
) -> ReviewResponseDTO:
    review = use_case.execute(ReviewMapper.to_create_request(body, user_id, car_id))
    return ReviewMapper.to_review_response(review)


@router.get(
    "/cars/{car_id}/reviews",
    response_model=CarReviewsResponseDTO,
    summary="List reviews of a car",
    description=CAR_REVIEWS_DESCRIPTION,
    responses=error_responses(400),
)
def list_car_reviews(
    car_id: str,
    use_case: GetCarReviews = Depends(get_car_reviews_use_case),
) -> CarReviewsResponseDTO:
    return ReviewMapper.to_car_reviews_response(use_case.execute(car_id))


@router.post(
    "/cars/{car_id}/reviews",
    response_model=ReviewResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Review a car",
    description=CREATE_REVIEW_DESCRIPTION,
    responses=error_responses(400, 401, 404),
)
def create_car_review(
    car_id: str,
    body: CreateReviewRequestDTO,
    user_id: str = Depends(current_user_id),
    use_case: CreateReview = Depends(get_create_review_use_case),
) -> ReviewResponseDTO:
    review = use_case.execute(ReviewMapper.to_create_request(body, user_id, car_id))
    return ReviewMapper.to_review_response(review)


@router.get(
    "/reviews/{review_id}",
    response_model=ReviewResponseDTO,
    summary="Get review by ID",
    responses=error_responses(400, 404),
)
def get_review(
    review_id: str,
    use_case: GetReview = Depends(get_review_use_case),
) -> ReviewResponseDTO:
    return ReviewMapper.to_review_response(use_case.execute(review_id))


@router.put(
    "/reviews/{review_id}",
    response_model=MessageResponse,
    summary="Update your review",
    description="Someone else's review answers 404, same as a missing one.",
    responses=error_responses(400, 401, 404),
)
def update_review(
    review_id: str,
    body: UpdateReviewRequestDTO,
    user_id: str = Depends(current_user_id),
    use_case: UpdateReview = Depends(get_update_review_use_case),
) -> MessageResponse:
    use_case.execute(review_id, user_id, ReviewMapper.to_review_update(body))
    return MessageResponse(message="Review updated successfully")


@router.delete(
    "/reviews/{review_id}",
    response_model=MessageResponse,
    summary="Delete your review",
    description="Someone else's review answers 404, same as a missing one.",
    responses=error_responses(400, 401, 404),
)
def delete_review(
    review_id: str,
    user_id: str = Depends(current_user_id),
    use_case: DeleteReview = Depends(get_delete_review_use_case),
) -> MessageResponse:
    use_case.execute(review_id, user_id)
    return MessageResponse(message="Review deleted successfully")
