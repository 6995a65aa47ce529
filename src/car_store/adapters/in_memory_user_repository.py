from __future__ import annotations

from dataclasses import replace

from car_store.adapters.read_write_lock import ReadWriteLock
from car_store.domain.clock import Clock, utc_now
from car_store.domain.errors import ConflictError
from car_store.domain.identifiers import new_id
from car_store.domain.user import DEFAULT_ROLE, NewUser, ProfileUpdate, User
from car_store.ports.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed users. Username and email uniqueness is checked under the write lock."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._users: dict[str, User] = {}
        self._clock = clock
        self._lock = ReadWriteLock()

    def create(self, user: NewUser) -> User:
        now = self._clock()
        stored = User(
            id=new_id(),
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
        with self._lock.write():
            self._ensure_unique(stored.username, stored.email, exclude_id=None)
            self._users[stored.id] = stored
        return stored

    def find_by_email(self, email: str) -> User | None:
        with self._lock.read():
            return next((u for u in self._users.values() if u.email == email), None)

    def find_by_username(self, username: str) -> User | None:
        with self._lock.read():
            return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock.read():
            return self._users.get(user_id)

    def update(self, user_id: str, profile: ProfileUpdate) -> bool:
        with self._lock.write():
            user = self._users.get(user_id)
            if user is None:
                return False
            self._ensure_unique(profile.username, profile.email, exclude_id=user_id)
            self._users[user_id] = replace(
                user,
                username=profile.username,
                email=profile.email,
                first_name=profile.first_name,
                last_name=profile.last_name,
                phone=profile.phone,
                updated_at=self._clock(),
            )
            return True

    def _ensure_unique(self, username: str, email: str, exclude_id: str | None) -> None:
        # Caller holds the write lock
        for other in self._users.values():
            if other.id == exclude_id:
                continue
            if other.username == username or other.email == email:
                raise ConflictError("Username or email already exists")
