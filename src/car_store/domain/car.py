from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from car_store.domain.errors import ValidationError

MIN_YEAR = 1900
MAX_YEAR = 9999
# Column limits: NUMERIC(12, 2) prices and 32-bit integer counters
PRICE_QUANTUM = Decimal("0.01")
PRICE_LIMIT = Decimal("10000000000")
MAX_INT = 2_147_483_647
TEXT_LIMITS = {
    "make": 50,
    "model": 50,
    "body_type": 30,
    "fuel_type": 20,
    "transmission": 20,
    "color": 30,
}


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


def validate_price(price: Decimal) -> None:
    if price <= 0:
        raise ValidationError("Price must be greater than 0", field="price")
    if price >= PRICE_LIMIT:
        raise ValidationError(f"Price must be less than {PRICE_LIMIT}", field="price")
    if price != price.quantize(PRICE_QUANTUM):
        raise ValidationError("Price must have at most 2 decimal places", field="price")


def validate_mileage(mileage: int) -> None:
    if mileage < 0:
        raise ValidationError("Mileage must be >= 0", field="mileage")
    if mileage > MAX_INT:
        raise ValidationError(f"Mileage must be <= {MAX_INT}", field="mileage")


@dataclass(frozen=True)
class Car:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    mileage: int = 0
    body_type: str = ""
    fuel_type: str = ""
    transmission: str = ""
    color: str = ""
    horsepower: int = 0
    engine_size: float = 0.0
    description: str = ""
    image_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class NewCar:
    """Attributes supplied by a client when listing a car."""

    make: str
    model: str
    year: int
    price: Decimal
    mileage: int = 0
    body_type: str = ""
    fuel_type: str = ""
    transmission: str = ""
    color: str = ""
    horsepower: int = 0
    engine_size: float = 0.0
    description: str = ""
    image_url: str = ""

    def validate(self) -> None:
        """
        Validate catalog invariants.

        Raises:
            ValidationError: If make/model are blank, a value is out of range
                or does not fit its storage column
        """
        if not self.make.strip() or not self.model.strip():
            raise ValidationError("Make and model are required")
        for name, limit in TEXT_LIMITS.items():
            if len(getattr(self, name)) > limit:
                raise ValidationError(
                    f"{name} must be at most {limit} characters", field=name
                )
        if self.year < MIN_YEAR:
            raise ValidationError(f"Year must be {MIN_YEAR} or later", field="year")
        if self.year > MAX_YEAR:
            raise ValidationError(f"Year must be {MAX_YEAR} or earlier", field="year")
        validate_price(self.price)
        validate_mileage(self.mileage)
        if not 0 <= self.horsepower <= MAX_INT:
            raise ValidationError(
                f"Horsepower must be between 0 and {MAX_INT}", field="horsepower"
            )


@dataclass(frozen=True, slots=True)
class CarUpdate:
    """Partial update: only fields that are not None are applied."""

    price: Decimal | None = None
    mileage: int | None = None
    description: str | None = None

    def validate(self) -> None:
        if self.price is not None:
            validate_price(self.price)
        if self.mileage is not None:
            validate_mileage(self.mileage)


@dataclass(frozen=True, slots=True)
class CarFilters:
    make: str | None = None
    body_type: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        if (
            self.year_min is not None
            and self.year_max is not None
            and self.year_min > self.year_max
        ):
            raise FilterValidationError("min_year cannot be greater than max_year")
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("min_price cannot be greater than max_price")
