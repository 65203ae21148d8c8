"""SQLAlchemy-backed implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from orderflow.domain.exceptions import DuplicateEmailError
from orderflow.domain.model.user import User
from orderflow.domain.repository.user_repository import UserRepository
from orderflow.infrastructure.persistence.orm import UserRow


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        return User(id=row.id, name=row.name, email=row.email) if row else None

    def get_by_email(self, email: str) -> User | None:
        row = self._session.scalars(
            select(UserRow).where(UserRow.email == email.lower())
        ).first()
        return User(id=row.id, name=row.name, email=row.email) if row else None

    def add(self, user: User) -> None:
        row = UserRow(name=user.name, email=user.email)
        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError as exc:
            # The email check and this insert are not atomic; the unique
            # constraint settles a concurrent registration.
            raise DuplicateEmailError(user.email) from exc
        user.id = row.id
