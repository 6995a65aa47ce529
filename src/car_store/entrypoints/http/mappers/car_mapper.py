from __future__ import annotations

from car_store.domain.car import PRICE_QUANTUM, Car, CarFilters, CarUpdate, NewCar
from car_store.entrypoints.http.dtos.cars import (
    CarCreateRequestDTO,
    CarFilterQueryDTO,
    CarResponseDTO,
    CarUpdateRequestDTO,
)


class CarMapper:
    """Maps between REST DTOs and domain models for the car catalog."""

    @staticmethod
    def to_new_car(dto: CarCreateRequestDTO) -> NewCar:
        return NewCar(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            price=dto.price,
            mileage=dto.mileage,
            body_type=dto.body_type,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            color=dto.color,
            horsepower=dto.horsepower,
            engine_size=dto.engine_size,
            description=dto.description,
            image_url=dto.image_url,
        )

    @staticmethod
    def to_car_update(dto: CarUpdateRequestDTO) -> CarUpdate:
        return CarUpdate(price=dto.price, mileage=dto.mileage, description=dto.description)

    @staticmethod
    def to_domain_filters(dto: CarFilterQueryDTO) -> CarFilters:
        """
        Converts query params to domain filters.

        Args:
            dto: Parsed list query parameters

        Returns:
            CarFilters: Domain filters with Decimal prices
        """
        return CarFilters(
            make=dto.make,
            body_type=dto.body_type,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            year_min=dto.min_year,
            year_max=dto.max_year,
            price_min=dto.min_price,
            price_max=dto.max_price,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Handles Decimal → str conversion at the boundary, always with two decimal places.
        """
        return CarResponseDTO(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            price=str(car.price.quantize(PRICE_QUANTUM)),
            mileage=car.mileage,
            body_type=car.body_type,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            color=car.color,
            horsepower=car.horsepower,
            engine_size=car.engine_size,
            description=car.description,
            image_url=car.image_url,
            created_at=car.created_at,
            updated_at=car.updated_at,
        )
