from __future__ import annotations

import pytest

from car_store.adapters.in_memory_user_repository import InMemoryUserRepository
from car_store.domain.errors import ConflictError
from car_store.domain.user import NewUser, ProfileUpdate


@pytest.fixture()
def repo(clock) -> InMemoryUserRepository:
    return InMemoryUserRepository(clock=clock)


def new_user(username: str = "jdoe", email: str = "jdoe@example.com", role: str = "") -> NewUser:
    return NewUser(username=username, email=email, password_hash="hash", role=role)


def test_create_defaults_role_to_user(repo: InMemoryUserRepository) -> None:
    user = repo.create(new_user())

    assert user.role == "user"
    assert user.created_at is not None
    assert repo.find_by_id(user.id) == user


def test_create_keeps_explicit_role(repo: InMemoryUserRepository) -> None:
    assert repo.create(new_user(role="admin")).role == "admin"


def test_lookups(repo: InMemoryUserRepository) -> None:
    user = repo.create(new_user())

    assert repo.find_by_email("jdoe@example.com") == user
    assert repo.find_by_username("jdoe") == user
    assert repo.find_by_username("nobody") is None
    assert repo.find_by_id("missing") is None


@pytest.mark.parametrize(
    "username, email",
    [("jdoe", "other@example.com"), ("other", "jdoe@example.com")],
)
def test_duplicate_username_or_email_conflicts(
    repo: InMemoryUserRepository, username: str, email: str
) -> None:
    repo.create(new_user())

    with pytest.raises(ConflictError):
        repo.create(new_user(username=username, email=email))

    assert repo.find_by_username("other") is None


def test_update_overwrites_profile(repo: InMemoryUserRepository) -> None:
    user = repo.create(new_user())

    updated = repo.update(
        user.id,
        ProfileUpdate(username="john", email="john@example.com", first_name="John", phone="555"),
    )

    assert updated is True
    stored = repo.find_by_id(user.id)
    assert stored is not None
    assert stored.username == "john"
    assert stored.first_name == "John"
    assert stored.password_hash == "hash"
    assert stored.updated_at > user.updated_at


def test_update_may_keep_own_username(repo: InMemoryUserRepository) -> None:
    user = repo.create(new_user())

    assert repo.update(user.id, ProfileUpdate(username="jdoe", email="jdoe@example.com")) is True


def test_update_to_taken_email_conflicts(repo: InMemoryUserRepository) -> None:
    repo.create(new_user())
    other = repo.create(new_user(username="other", email="other@example.com"))

    with pytest.raises(ConflictError):
        repo.update(other.id, ProfileUpdate(username="other", email="jdoe@example.com"))


def test_update_missing_user_returns_false(repo: InMemoryUserRepository) -> None:
    assert repo.update("missing", ProfileUpdate(username="a", email="b")) is False
