from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from car_store.entrypoints.http.dtos.cars import CarResponseDTO


class AddFavoriteRequestDTO(BaseModel):
    car_id: str = Field(default="", examples=["550e8400-e29b-41d4-a716-446655440000"])


class FavoriteResponseDTO(BaseModel):
    id: str
    user_id: str
    car_id: str
    car: CarResponseDTO
    created_at: datetime | None = None


class FavoritesCountResponseDTO(BaseModel):
    count: int


class FavoriteStatusResponseDTO(BaseModel):
    is_favorite: bool
