from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateReviewRequestDTO(BaseModel):
    """car_id is only read when the URL does not carry one."""

    car_id: str | None = None
    rating: int = Field(default=0, description="1 to 5 stars", examples=[4])
    comment: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "car_id": "550e8400-e29b-41d4-a716-446655440000",
                "rating": 4,
                "comment": "Smooth ride, thirsty in town.",
            }
        }
    )


class UpdateReviewRequestDTO(BaseModel):
    rating: int = Field(default=0, description="1 to 5 stars")
    comment: str = ""


class ReviewResponseDTO(BaseModel):
    id: str
    car_id: str
    user_id: str
    username: str
    rating: int
    comment: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CarReviewsResponseDTO(BaseModel):
    reviews: list[ReviewResponseDTO]
    average_rating: float
    total_reviews: int
