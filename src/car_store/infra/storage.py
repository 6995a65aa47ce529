"""
Storage backends.

A Storage owns the process-wide persistence state (an engine, or the
in-memory collections) and hands out a Repositories bundle per unit of work.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, contextmanager
from typing import Iterator

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from car_store.adapters.in_memory_car_repository import InMemoryCarRepository
from car_store.adapters.in_memory_favorite_repository import InMemoryFavoriteRepository
from car_store.adapters.in_memory_review_repository import InMemoryReviewRepository
from car_store.adapters.in_memory_user_repository import InMemoryUserRepository
from car_store.adapters.sql_car_repository import SqlCarRepository
from car_store.adapters.sql_favorite_repository import SqlFavoriteRepository
from car_store.adapters.sql_review_repository import SqlReviewRepository
from car_store.adapters.sql_user_repository import SqlUserRepository
from car_store.domain.errors import UpstreamError
from car_store.infra.config import Settings
from car_store.infra.db.session import (
    create_database_engine,
    create_session_factory,
    session_scope,
)
from car_store.infra.db.timeouts import QueryBudget
from car_store.ports.repositories import Repositories

logger = logging.getLogger(__name__)


class Storage(ABC):
    @abstractmethod
    def repositories(self) -> AbstractContextManager[Repositories]:
        """Context manager yielding repositories bound to one unit of work."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release connections. Called once on shutdown."""
        ...


class InMemoryStorage(Storage):
    """Process-local collections shared by every request."""

    def __init__(self) -> None:
        cars = InMemoryCarRepository()
        self._repositories = Repositories(
            cars=cars,
            users=InMemoryUserRepository(),
            favorites=InMemoryFavoriteRepository(cars),
            reviews=InMemoryReviewRepository(),
        )

    @contextmanager
    def repositories(self) -> Iterator[Repositories]:
        yield self._repositories

    def close(self) -> None:
        pass


class SqlStorage(Storage):
    """One SQLAlchemy session per unit of work, committed on success."""

    def __init__(self, engine: Engine, budget: QueryBudget | None = None) -> None:
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._budget = budget or QueryBudget()

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def repositories(self) -> Iterator[Repositories]:
        try:
            with session_scope(self._session_factory) as session:
                yield Repositories(
                    cars=SqlCarRepository(session, self._budget),
                    users=SqlUserRepository(session, self._budget),
                    favorites=SqlFavoriteRepository(session, self._budget),
                    reviews=SqlReviewRepository(session, self._budget),
                )
        except SQLAlchemyError as exc:
            logger.error(
                "Storage operation failed",
                exc_info=exc,
                extra={"error_type": type(exc).__name__},
            )
            raise UpstreamError("Storage operation failed") from exc

    def close(self) -> None:
        self._engine.dispose()


def create_storage(settings: Settings) -> Storage:
    """Build the storage backend selected by settings."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage")
        return InMemoryStorage()

    engine = create_database_engine(settings)
    logger.info("Using SQL storage", extra={"dialect": engine.dialect.name})
    return SqlStorage(
        engine,
        QueryBudget(
            point=settings.point_query_timeout_seconds,
            listing=settings.list_query_timeout_seconds,
        ),
    )
