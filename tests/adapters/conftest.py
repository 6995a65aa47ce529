from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from car_store.infra.config import Settings
from car_store.infra.db.models import Base
from car_store.infra.db.session import (
    create_database_engine,
    create_session_factory,
    session_scope,
)


class StepClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """In-memory SQLite database with the full schema."""
    engine = create_database_engine(Settings(database_url="sqlite://"))
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture()
def session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    with session_scope(session_factory) as session:
        yield session
