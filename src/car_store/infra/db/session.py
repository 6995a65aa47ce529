from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from car_store.infra.config import Settings


def create_database_engine(settings: Settings) -> Engine:
    """
    Create the database engine for this process.

    Connection Pool Configuration (PostgreSQL):
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_timeout: Seconds to wait for a free connection (point-operation budget)
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)

    SQLite URLs (local runs and tests) get a single shared connection
    when in-memory, so every session sees the same database.
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_timeout = max(1, int(settings.point_query_timeout_seconds))
    return create_engine(
        url,
        pool_size=10,
        max_overflow=20,
        pool_timeout=settings.point_query_timeout_seconds,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args={"connect_timeout": connect_timeout},
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = factory()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
