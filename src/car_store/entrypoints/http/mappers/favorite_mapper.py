from __future__ import annotations

from car_store.domain.favorite import FavoriteWithCar
from car_store.entrypoints.http.dtos.favorites import FavoriteResponseDTO
from car_store.entrypoints.http.mappers.car_mapper import CarMapper


class FavoriteMapper:
    @staticmethod
    def to_favorite_response(entry: FavoriteWithCar) -> FavoriteResponseDTO:
        return FavoriteResponseDTO(
            id=entry.favorite.id,
            user_id=entry.favorite.user_id,
            car_id=entry.favorite.car_id,
            car=CarMapper.to_car_response(entry.car),
            created_at=entry.favorite.created_at,
        )

    @staticmethod
    def to_favorites_response(entries: list[FavoriteWithCar]) -> list[FavoriteResponseDTO]:
        return [FavoriteMapper.to_favorite_response(entry) for entry in entries]
