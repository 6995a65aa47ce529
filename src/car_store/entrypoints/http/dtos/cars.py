from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError


class CarCreateRequestDTO(BaseModel):
    """Request payload for listing a car. Business rules are checked in the domain."""

    make: str = Field(default="", examples=["Toyota"])
    model: str = Field(default="", examples=["Camry"])
    year: int = Field(default=0, description="Model year, 1900 to 9999", examples=[2020])
    price: Decimal = Field(
        default=Decimal("0"),
        description="Price, greater than 0 with at most 2 decimal places (number or decimal string)",
        examples=["25000.00"],
    )
    mileage: int = Field(default=0, description="Odometer reading, km", examples=[42000])
    body_type: str = Field(default="", examples=["sedan"])
    fuel_type: str = Field(default="", examples=["petrol"])
    transmission: str = Field(default="", examples=["automatic"])
    color: str = ""
    horsepower: int = 0
    engine_size: float = Field(default=0.0, description="Engine displacement, liters")
    description: str = ""
    image_url: str = ""


class CarUpdateRequestDTO(BaseModel):
    """Partial update: omitted fields are left unchanged."""

    price: Decimal | None = None
    mileage: int | None = None
    description: str | None = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"price": "23500.00", "mileage": 45000}}
    )


class CarResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: str
    mileage: int
    body_type: str
    fuel_type: str
    transmission: str
    color: str
    horsepower: int
    engine_size: float
    description: str
    image_url: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CarFilterQueryDTO(BaseModel):
    """Query parameters for listing cars. snake_case and camelCase names are both accepted."""

    make: str | None = None
    body_type: str | None = Field(
        default=None, validation_alias=AliasChoices("body_type", "bodyType")
    )
    fuel_type: str | None = Field(
        default=None, validation_alias=AliasChoices("fuel_type", "fuelType")
    )
    transmission: str | None = None
    min_price: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("min_price", "minPrice")
    )
    max_price: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("max_price", "maxPrice")
    )
    min_year: int | None = Field(
        default=None, validation_alias=AliasChoices("min_year", "minYear")
    )
    max_year: int | None = Field(
        default=None, validation_alias=AliasChoices("max_year", "maxYear")
    )


def car_filter_query(request: Request) -> CarFilterQueryDTO:
    """Parse car list filters from the query string. Empty values count as absent."""
    params = {key: value for key, value in request.query_params.items() if value != ""}
    try:
        return CarFilterQueryDTO.model_validate(params)
    except PydanticValidationError as exc:
        errors = [{**error, "loc": ("query", *error["loc"])} for error in exc.errors()]
        raise RequestValidationError(errors)
