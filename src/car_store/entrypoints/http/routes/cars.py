from fastapi import APIRouter, Depends, status

from car_store.entrypoints.http.auth import current_user_id
from car_store.entrypoints.http.dependencies import (
    get_car_by_id_use_case,
    get_create_car_use_case,
    get_delete_car_use_case,
    get_list_cars_use_case,
    get_update_car_use_case,
)
from car_store.entrypoints.http.dtos.cars import (
    CarCreateRequestDTO,
    CarFilterQueryDTO,
    CarResponseDTO,
    CarUpdateRequestDTO,
    car_filter_query,
)
from car_store.entrypoints.http.error_responses import MessageResponse, error_responses
from car_store.entrypoints.http.mappers.car_mapper import CarMapper
from car_store.use_cases.cars import CreateCar, DeleteCar, GetCarById, ListCars, UpdateCar


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=list[CarResponseDTO],
    summary="List cars",
    description="""
    List the catalog with optional filters.

    ## Filters
    - All filters use AND semantics
    - make, body_type, fuel_type, transmission: case-insensitive exact match
    - min_year/max_year, min_price/max_price: inclusive ranges
    - camelCase names (bodyType, minPrice, ...) are accepted too

    ## Example
    ```
    GET /api/cars?min_price=20000&max_price=50000&body_type=suv
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "make": "Toyota",
                            "model": "RAV4",
                            "year": 2021,
                            "price": "31500.00",
                            "body_type": "suv",
                        }
                    ]
                }
            },
        },
        **error_responses(400),
    },
)
def list_cars(
    query: CarFilterQueryDTO = Depends(car_filter_query),
    use_case: ListCars = Depends(get_list_cars_use_case),
) -> list[CarResponseDTO]:
    """Parse → execute → map → return."""
    filters = CarMapper.to_domain_filters(query)
    cars = use_case.execute(filters)
    return [CarMapper.to_car_response(car) for car in cars]


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="List a car for sale",
    description="Requires make, model, year >= 1900 and price > 0.",
    responses=error_responses(400, 401),
)
def create_car(
    body: CarCreateRequestDTO,
    _user_id: str = Depends(current_user_id),
    use_case: CreateCar = Depends(get_create_car_use_case),
) -> CarResponseDTO:
    car = use_case.execute(CarMapper.to_new_car(body))
    return CarMapper.to_car_response(car)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get car by ID",
    responses=error_responses(400, 404),
)
def get_car(
    car_id: str,
    use_case: GetCarById = Depends(get_car_by_id_use_case),
) -> CarResponseDTO:
    return CarMapper.to_car_response(use_case.execute(car_id))


@router.put(
    "/cars/{car_id}",
    response_model=MessageResponse,
    summary="Update price, mileage or description",
    responses=error_responses(400, 401, 404),
)
def update_car(
    car_id: str,
    body: CarUpdateRequestDTO,
    _user_id: str = Depends(current_user_id),
    use_case: UpdateCar = Depends(get_update_car_use_case),
) -> MessageResponse:
    use_case.execute(car_id, CarMapper.to_car_update(body))
    return MessageResponse(message="Car updated successfully")


@router.delete(
    "/cars/{car_id}",
    response_model=MessageResponse,
    summary="Delete a car",
    description="Reviews and favorites pointing at the car are kept.",
    responses=error_responses(400, 401, 404),
)
def delete_car(
    car_id: str,
    _user_id: str = Depends(current_user_id),
    use_case: DeleteCar = Depends(get_delete_car_use_case),
) -> MessageResponse:
    use_case.execute(car_id)
    return MessageResponse(message="Car deleted successfully")
