"""Test suite for catalog use cases."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from car_store.domain.car import Car, CarFilters, CarUpdate, NewCar
from car_store.domain.errors import NotFoundError, ValidationError
from car_store.ports.car_repository import CarRepository
from car_store.use_cases.cars import CreateCar, DeleteCar, GetCarById, ListCars, UpdateCar

CAR_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock CarRepository."""
    return Mock(spec=CarRepository)


@pytest.fixture()
def sample_car() -> Car:
    return Car(id=CAR_ID, make="Toyota", model="Corolla", year=2020, price=Decimal("25000.00"))


# ==============================================================================
# CreateCar
# ==============================================================================


def test_create_car_stores_valid_car(mock_repository: Mock, sample_car: Car) -> None:
    mock_repository.create.return_value = sample_car
    new_car = NewCar(make="Toyota", model="Corolla", year=2020, price=Decimal("25000.00"))

    result = CreateCar(car_repository=mock_repository).execute(new_car)

    assert result == sample_car
    mock_repository.create.assert_called_once_with(new_car)


def test_create_car_rejects_invalid_car_without_storing(mock_repository: Mock) -> None:
    new_car = NewCar(make="Toyota", model="Corolla", year=1850, price=Decimal("25000.00"))

    with pytest.raises(ValidationError, match="Year must be 1900 or later"):
        CreateCar(car_repository=mock_repository).execute(new_car)

    mock_repository.create.assert_not_called()


# ==============================================================================
# ListCars
# ==============================================================================


def test_list_cars_delegates_filters(mock_repository: Mock, sample_car: Car) -> None:
    mock_repository.list.return_value = [sample_car]
    filters = CarFilters(make="toyota", price_max=Decimal("30000"))

    result = ListCars(car_repository=mock_repository).execute(filters)

    assert result == [sample_car]
    mock_repository.list.assert_called_once_with(filters)


def test_list_cars_rejects_reversed_range(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError):
        ListCars(car_repository=mock_repository).execute(CarFilters(year_min=2022, year_max=2020))

    mock_repository.list.assert_not_called()


# ==============================================================================
# GetCarById
# ==============================================================================


def test_get_car_returns_car(mock_repository: Mock, sample_car: Car) -> None:
    mock_repository.get_by_id.return_value = sample_car

    result = GetCarById(car_repository=mock_repository).execute(CAR_ID)

    assert result == sample_car
    mock_repository.get_by_id.assert_called_once_with(CAR_ID)


def test_get_car_normalizes_id_before_lookup(mock_repository: Mock, sample_car: Car) -> None:
    mock_repository.get_by_id.return_value = sample_car

    GetCarById(car_repository=mock_repository).execute(CAR_ID.upper())

    mock_repository.get_by_id.assert_called_once_with(CAR_ID)


def test_get_car_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetCarById(car_repository=mock_repository).execute(CAR_ID)

    assert exc_info.value.message == "Car not found"


def test_get_car_rejects_malformed_id(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError, match="Invalid car ID"):
        GetCarById(car_repository=mock_repository).execute("not-a-uuid")

    mock_repository.get_by_id.assert_not_called()


# ==============================================================================
# UpdateCar / DeleteCar
# ==============================================================================


def test_update_car(mock_repository: Mock) -> None:
    mock_repository.update.return_value = True
    changes = CarUpdate(price=Decimal("21000"))

    UpdateCar(car_repository=mock_repository).execute(CAR_ID, changes)

    mock_repository.update.assert_called_once_with(CAR_ID, changes)


def test_update_missing_car_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.update.return_value = False

    with pytest.raises(NotFoundError):
        UpdateCar(car_repository=mock_repository).execute(CAR_ID, CarUpdate(mileage=5))


def test_update_rejects_invalid_changes(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError):
        UpdateCar(car_repository=mock_repository).execute(CAR_ID, CarUpdate(price=Decimal("-5")))

    mock_repository.update.assert_not_called()


def test_delete_car(mock_repository: Mock) -> None:
    mock_repository.delete.return_value = True

    DeleteCar(car_repository=mock_repository).execute(CAR_ID)

    mock_repository.delete.assert_called_once_with(CAR_ID)


def test_delete_missing_car_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.delete.return_value = False

    with pytest.raises(NotFoundError):
        DeleteCar(car_repository=mock_repository).execute(CAR_ID)
