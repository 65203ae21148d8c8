"""Abstract repository for users (identity collaborator)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by exact (lower-cased) email, or None."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user and assign its ID.

        Raises ``DuplicateEmailError`` if the email is already taken.
        """
