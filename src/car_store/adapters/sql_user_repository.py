"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from car_store.adapters.sql_car_repository import as_uuid
from car_store.domain.clock import Clock, utc_now
from car_store.domain.errors import ConflictError
from car_store.domain.user import DEFAULT_ROLE, NewUser, ProfileUpdate, User
from car_store.infra.db.models.user import UserRow
from car_store.infra.db.timeouts import QueryBudget, apply_statement_timeout
from car_store.ports.user_repository import UserRepository


class SqlUserRepository(UserRepository):
    """
    Users table access.

    Uniqueness of username/email is a table constraint; an IntegrityError
    on flush is the authoritative duplicate signal and becomes ConflictError.
    """

    def __init__(
        self,
        session: Session,
        budget: QueryBudget | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._session = session
        self._budget = budget or QueryBudget()
        self._clock = clock

    def create(self, user: NewUser) -> User:
        apply_statement_timeout(self._session, self._budget.point)
        now = self._clock()
        row = UserRow(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            role=user.role or DEFAULT_ROLE,
            created_at=now,
            updated_at=now,
        )
        self._session.add(row)
        self._flush_unique()
        return self._to_domain(row)

    def find_by_email(self, email: str) -> User | None:
        return self._find_one(select(UserRow).where(UserRow.email == email))

    def find_by_username(self, username: str) -> User | None:
        return self._find_one(select(UserRow).where(UserRow.username == username))

    def find_by_id(self, user_id: str) -> User | None:
        key = as_uuid(user_id)
        if key is None:
            return None
        return self._find_one(select(UserRow).where(UserRow.id == key))

    def update(self, user_id: str, profile: ProfileUpdate) -> bool:
        key = as_uuid(user_id)
        if key is None:
            return False
        apply_statement_timeout(self._session, self._budget.point)
        row = self._session.get(UserRow, key)
        if row is None:
            return False

        row.username = profile.username
        row.email = profile.email
        row.first_name = profile.first_name
        row.last_name = profile.last_name
        row.phone = profile.phone
        row.updated_at = self._clock()

        self._flush_unique()
        return True

    def _find_one(self, query) -> User | None:
        apply_statement_timeout(self._session, self._budget.point)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _flush_unique(self) -> None:
        try:
            self._session.flush()
        except IntegrityError as exc:
            self._session.rollback()
            raise ConflictError("Username or email already exists") from exc

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(
            id=str(row.id),
            username=row.username,
            email=row.email,
            password_hash=row.password_hash,
            first_name=row.first_name,
            last_name=row.last_name,
            phone=row.phone,
            role=row.role,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
