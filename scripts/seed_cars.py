#!/usr/bin/env python3
"""
Seed the cars table with deterministic sample listings.

Features:
- Deterministic: fixed seed → same catalog every run
- Idempotent: clears the cars table before seeding
- Goes through SqlCarRepository, so rows get ids and timestamps like API-created cars

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_cars.py [count]
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal

from sqlalchemy import delete

from car_store.adapters.sql_car_repository import SqlCarRepository
from car_store.domain.car import NewCar
from car_store.infra.config import Settings
from car_store.infra.db.models import CarRow
from car_store.infra.db.session import (
    create_database_engine,
    create_session_factory,
    session_scope,
)


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_CARS = 40
CURRENT_YEAR = 2026


# ==============================================================================
# Catalog Data
# ==============================================================================

# (make, model, body_type, base price for a new car)
MODELS = [
    ("Toyota", "Corolla", "sedan", Decimal("24000")),
    ("Toyota", "RAV4", "suv", Decimal("32000")),
    ("Toyota", "Tacoma", "pickup", Decimal("36000")),
    ("Honda", "Civic", "sedan", Decimal("25000")),
    ("Honda", "CR-V", "suv", Decimal("31000")),
    ("Ford", "F-150", "pickup", Decimal("42000")),
    ("Ford", "Mustang", "coupe", Decimal("38000")),
    ("Ford", "Escape", "suv", Decimal("29000")),
    ("Volkswagen", "Golf", "hatchback", Decimal("26000")),
    ("Mazda", "CX-5", "suv", Decimal("30000")),
    ("BMW", "3 Series", "sedan", Decimal("46000")),
    ("BMW", "X5", "suv", Decimal("66000")),
    ("Tesla", "Model 3", "sedan", Decimal("40000")),
    ("Tesla", "Model Y", "suv", Decimal("45000")),
]

TRANSMISSIONS = ["automatic", "manual", "cvt"]
COLORS = ["white", "black", "silver", "gray", "blue", "red"]
CONDITIONS = ["One owner", "Full service history", "Clean title", "New tires"]


# ==============================================================================
# Listing Generation
# ==============================================================================


def calculate_price(base_price: Decimal, year: int) -> Decimal:
    """~8% depreciation per year, capped at 65%, rounded to the nearest 100."""
    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(Decimal("0.08") * years_old, Decimal("0.65"))
    variance = Decimal(str(round(random.uniform(0.92, 1.08), 3)))

    price = base_price * (Decimal("1") - depreciation) * variance
    return (price / 100).quantize(Decimal("1")) * 100


def generate_car() -> NewCar:
    make, model, body_type, base_price = random.choice(MODELS)
    year = random.randint(CURRENT_YEAR - 10, CURRENT_YEAR)

    if make == "Tesla":
        fuel_type, transmission, engine_size = "electric", "automatic", 0.0
    else:
        fuel_type = random.choices(["petrol", "diesel", "hybrid"], weights=[6, 1, 2], k=1)[0]
        transmission = random.choices(TRANSMISSIONS, weights=[6, 2, 2], k=1)[0]
        engine_size = random.choice([1.5, 2.0, 2.5, 3.0, 3.5])

    years_old = CURRENT_YEAR - year
    mileage = random.randint(0, max(1000, years_old * 18000))

    return NewCar(
        make=make,
        model=model,
        year=year,
        price=calculate_price(base_price, year),
        mileage=mileage,
        body_type=body_type,
        fuel_type=fuel_type,
        transmission=transmission,
        color=random.choice(COLORS),
        horsepower=random.randint(140, 400),
        engine_size=engine_size,
        description=f"{year} {make} {model}. {random.choice(CONDITIONS)}.",
        image_url=f"/images/{make.lower()}-{model.lower().replace(' ', '-')}.jpg",
    )


def seed_cars(num_cars: int = NUM_CARS, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)
    settings = Settings.from_env()
    engine = create_database_engine(settings)

    print(f"Seeding {num_cars} cars (seed={seed})...")

    try:
        with session_scope(create_session_factory(engine)) as session:
            deleted = session.execute(delete(CarRow)).rowcount
            print(f"  Deleted {deleted} existing cars")

            repository = SqlCarRepository(session)
            cars = [repository.create(generate_car()) for _ in range(num_cars)]

        print(f"Seeded {len(cars)} cars")
        for car in cars[:5]:
            print(f"  {car.year} {car.make} {car.model} - ${car.price:,.2f} ({car.body_type})")
        if len(cars) > 5:
            print(f"  ... and {len(cars) - 5} more")
    finally:
        engine.dispose()


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else NUM_CARS
    try:
        seed_cars(count)
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
