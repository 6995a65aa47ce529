from fastapi import APIRouter, Depends

from car_store.entrypoints.http.auth import current_user_id
from car_store.entrypoints.http.dependencies import (
    get_add_favorite_use_case,
    get_check_favorite_use_case,
    get_count_favorites_use_case,
    get_list_favorites_use_case,
    get_remove_favorite_use_case,
)
from car_store.entrypoints.http.dtos.favorites import (
    AddFavoriteRequestDTO,
    FavoriteResponseDTO,
    FavoritesCountResponseDTO,
    FavoriteStatusResponseDTO,
)
from car_store.entrypoints.http.error_responses import MessageResponse, error_responses
from car_store.entrypoints.http.mappers.favorite_mapper import FavoriteMapper
from car_store.use_cases.favorites import (
    AddToFavorites,
    CheckFavorite,
    CountFavorites,
    ListFavorites,
    RemoveFromFavorites,
)


router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get(
    "",
    response_model=list[FavoriteResponseDTO],
    summary="List the current user's favorites",
    description="Oldest first, each with its car. Favorites of deleted cars are omitted.",
    responses=error_responses(401),
)
def list_favorites(
    user_id: str = Depends(current_user_id),
    use_case: ListFavorites = Depends(get_list_favorites_use_case),
) -> list[FavoriteResponseDTO]:
    return FavoriteMapper.to_favorites_response(use_case.execute(user_id))


@router.post(
    "",
    response_model=MessageResponse,
    summary="Add a car to favorites",
    description="Idempotent: adding the same car twice keeps one favorite.",
    responses=error_responses(400, 401),
)
def add_favorite(
    body: AddFavoriteRequestDTO,
    user_id: str = Depends(current_user_id),
    use_case: AddToFavorites = Depends(get_add_favorite_use_case),
) -> MessageResponse:
    use_case.execute(user_id, body.car_id)
    return MessageResponse(message="Added to favorites successfully")


# Must be declared before /{car_id}
@router.get(
    "/count",
    response_model=FavoritesCountResponseDTO,
    summary="Count the current user's favorites",
    responses=error_responses(401),
)
def count_favorites(
    user_id: str = Depends(current_user_id),
    use_case: CountFavorites = Depends(get_count_favorites_use_case),
) -> FavoritesCountResponseDTO:
    return FavoritesCountResponseDTO(count=use_case.execute(user_id))


@router.get(
    "/{car_id}",
    response_model=FavoriteStatusResponseDTO,
    summary="Check whether a car is a favorite",
    responses=error_responses(400, 401),
)
def check_favorite(
    car_id: str,
    user_id: str = Depends(current_user_id),
    use_case: CheckFavorite = Depends(get_check_favorite_use_case),
) -> FavoriteStatusResponseDTO:
    return FavoriteStatusResponseDTO(is_favorite=use_case.execute(user_id, car_id))


@router.delete(
    "/{car_id}",
    response_model=MessageResponse,
    summary="Remove a car from favorites",
    description="Succeeds even when the car was not a favorite.",
    responses=error_responses(400, 401),
)
def remove_favorite(
    car_id: str,
    user_id: str = Depends(current_user_id),
    use_case: RemoveFromFavorites = Depends(get_remove_favorite_use_case),
) -> MessageResponse:
    use_case.execute(user_id, car_id)
    return MessageResponse(message="Removed from favorites successfully")
