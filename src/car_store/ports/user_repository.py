from __future__ import annotations

from abc import ABC, abstractmethod

from car_store.domain.user import NewUser, ProfileUpdate, User


class UserRepository(ABC):
    """
    Port for user accounts.

    Username and email are unique. Implementations enforce this at the
    storage level and raise ConflictError when a write would violate it.
    """

    @abstractmethod
    def create(self, user: NewUser) -> User:
        """
        Store a user, assigning id and timestamps. An empty role defaults to "user".

        Raises:
            ConflictError: If the username or email is already taken
        """
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    def find_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def find_by_id(self, user_id: str) -> User | None: ...

    @abstractmethod
    def update(self, user_id: str, profile: ProfileUpdate) -> bool:
        """
        Overwrite username, email, first/last name and phone; refresh updated_at.

        Returns:
            False if no user matched user_id

        Raises:
            ConflictError: If the new username or email belongs to another user
        """
        ...
