"""
Test suite for InMemoryCarRepository.

The in-memory adapter is the reference implementation of the
CarRepository contract:
- Filter semantics (case-insensitive equality, inclusive ranges, AND)
- Partial updates that always refresh updated_at
- Delete reports whether a car existed
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from car_store.adapters.in_memory_car_repository import InMemoryCarRepository
from car_store.domain.car import Car, CarFilters, CarUpdate, NewCar


@pytest.fixture()
def cars() -> list[Car]:
    return [
        Car(id="1", make="Toyota", model="RAV4", year=2019, price=Decimal("28000.00"), body_type="SUV"),
        Car(id="2", make="Toyota", model="Camry", year=2020, price=Decimal("25000.00"), body_type="sedan"),
        Car(id="3", make="BMW", model="X5", year=2022, price=Decimal("61000.00"), body_type="suv"),
        Car(id="4", make="Honda", model="CR-V", year=2018, price=Decimal("19999.99"), body_type="suv"),
        Car(id="5", make="Ford", model="Escape", year=2021, price=Decimal("50000.00"), body_type="suv",
            fuel_type="Hybrid", transmission="automatic"),
    ]


# ==============================================================================
# Filter Edge Cases
# ==============================================================================


def test_list_without_filters_returns_all_in_insertion_order(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    assert [car.id for car in repo.list(CarFilters())] == ["1", "2", "3", "4", "5"]


def test_make_is_case_insensitive_exact_match(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    assert [car.id for car in repo.list(CarFilters(make="toyota"))] == ["1", "2"]
    assert repo.list(CarFilters(make="Toy")) == []


def test_price_range_and_body_type_are_combined(cars: list[Car]) -> None:
    """min_price=20000, max_price=50000, body_type=suv: all three must hold."""
    repo = InMemoryCarRepository(cars)

    result = repo.list(
        CarFilters(price_min=Decimal("20000"), price_max=Decimal("50000"), body_type="suv")
    )

    assert [car.id for car in result] == ["1", "5"]
    for car in result:
        assert Decimal("20000") <= car.price <= Decimal("50000")
        assert car.body_type.lower() == "suv"


def test_year_range_is_inclusive(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    result = repo.list(CarFilters(year_min=2019, year_max=2021))

    assert [car.id for car in result] == ["1", "2", "5"]


def test_fuel_type_and_transmission_filters(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    assert [car.id for car in repo.list(CarFilters(fuel_type="hybrid"))] == ["5"]
    assert [car.id for car in repo.list(CarFilters(transmission="AUTOMATIC"))] == ["5"]


def test_no_match_returns_empty_list(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    assert repo.list(CarFilters(make="Lada")) == []


# ==============================================================================
# Create / Get
# ==============================================================================


def test_create_assigns_id_and_timestamps(clock) -> None:
    repo = InMemoryCarRepository(clock=clock)

    car = repo.create(
        NewCar(make="Mazda", model="CX-5", year=2021, price=Decimal("27500.50"), color="red")
    )

    assert car.id
    assert car.created_at is not None
    assert car.created_at == car.updated_at
    assert repo.get_by_id(car.id) == car
    assert car.price == Decimal("27500.50")
    assert car.color == "red"


def test_get_by_id_returns_none_when_missing(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    assert repo.get_by_id("missing") is None


# ==============================================================================
# Update / Delete
# ==============================================================================


def test_update_applies_only_provided_fields(clock) -> None:
    repo = InMemoryCarRepository(clock=clock)
    car = repo.create(NewCar(make="Kia", model="Rio", year=2017, price=Decimal("9000"), mileage=80000))

    assert repo.update(car.id, CarUpdate(price=Decimal("8500"))) is True

    updated = repo.get_by_id(car.id)
    assert updated is not None
    assert updated.price == Decimal("8500")
    assert updated.mileage == 80000
    assert updated.updated_at > car.updated_at


def test_update_with_no_fields_still_refreshes_timestamp(clock) -> None:
    repo = InMemoryCarRepository(clock=clock)
    car = repo.create(NewCar(make="Kia", model="Rio", year=2017, price=Decimal("9000")))

    repo.update(car.id, CarUpdate())

    updated = repo.get_by_id(car.id)
    assert updated is not None
    assert updated.updated_at > car.updated_at
    assert updated.created_at == car.created_at


def test_update_missing_car_returns_false() -> None:
    repo = InMemoryCarRepository()

    assert repo.update("missing", CarUpdate(mileage=1)) is False


def test_delete_removes_car_once(cars: list[Car]) -> None:
    repo = InMemoryCarRepository(cars)

    assert repo.delete("3") is True
    assert repo.get_by_id("3") is None
    assert repo.delete("3") is False
