from __future__ import annotations

from datetime import timezone

import pytest
from sqlalchemy.orm import Session, sessionmaker

from car_store.adapters.sql_review_repository import SqlReviewRepository
from car_store.domain.identifiers import new_id
from car_store.domain.review import NewReview, ReviewUpdate
from car_store.infra.db.session import session_scope


@pytest.fixture()
def repo(session: Session, clock) -> SqlReviewRepository:
    return SqlReviewRepository(session, clock=clock)


@pytest.fixture()
def car_id() -> str:
    return new_id()


@pytest.fixture()
def author_id() -> str:
    return new_id()


def review(car_id: str, user_id: str, rating: int) -> NewReview:
    return NewReview(car_id=car_id, user_id=user_id, username="alice", rating=rating, comment="ok")


def test_car_reviews_are_newest_first_with_average(
    repo: SqlReviewRepository, car_id: str, author_id: str
) -> None:
    ids = [repo.create_review(review(car_id, author_id, rating)).id for rating in (5, 3, 4)]
    repo.create_review(review(new_id(), author_id, 1))

    result = repo.get_car_reviews(car_id)

    assert [r.id for r in result.reviews] == list(reversed(ids))
    assert result.average_rating == 4.0
    assert result.total_reviews == 3


def test_car_without_reviews_averages_zero(repo: SqlReviewRepository, car_id: str) -> None:
    result = repo.get_car_reviews(car_id)

    assert result.total_reviews == 0
    assert result.average_rating == 0.0


def test_get_review_by_id(repo: SqlReviewRepository, car_id: str, author_id: str) -> None:
    created = repo.create_review(review(car_id, author_id, 4))

    assert repo.get_review_by_id(created.id) == created
    assert repo.get_review_by_id("nope") is None
    assert repo.get_review_by_id(new_id()) is None


def test_committed_review_reads_back_in_utc(
    repo: SqlReviewRepository,
    session: Session,
    session_factory: sessionmaker[Session],
    car_id: str,
    author_id: str,
) -> None:
    created = repo.create_review(review(car_id, author_id, 4))
    session.commit()

    with session_scope(session_factory) as other:
        stored = SqlReviewRepository(other).get_review_by_id(created.id)

    assert stored == created
    assert stored.created_at.tzinfo == timezone.utc


def test_owner_update_is_visible(repo: SqlReviewRepository, car_id: str, author_id: str) -> None:
    created = repo.create_review(review(car_id, author_id, 2))

    assert repo.update_review(created.id, author_id, ReviewUpdate(rating=5, comment="Better")) is True

    updated = repo.get_review_by_id(created.id)
    assert updated is not None
    assert updated.rating == 5
    assert updated.comment == "Better"
    assert repo.get_car_reviews(car_id).average_rating == 5.0


def test_non_owner_update_and_delete_match_nothing(
    repo: SqlReviewRepository, car_id: str, author_id: str
) -> None:
    created = repo.create_review(review(car_id, author_id, 2))
    stranger = new_id()

    assert repo.update_review(created.id, stranger, ReviewUpdate(rating=1)) is False
    assert repo.delete_review(created.id, stranger) is False
    assert repo.update_review(new_id(), author_id, ReviewUpdate(rating=1)) is False

    stored = repo.get_review_by_id(created.id)
    assert stored is not None
    assert stored.rating == 2


def test_owner_delete(repo: SqlReviewRepository, car_id: str, author_id: str) -> None:
    created = repo.create_review(review(car_id, author_id, 3))

    assert repo.delete_review(created.id, author_id) is True
    assert repo.get_review_by_id(created.id) is None
    assert repo.get_car_reviews(car_id).total_reviews == 0
