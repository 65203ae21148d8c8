"""Application service: Register User use case.

Stand-in for the identity collaborator so that orders have a user
projection (id, name, email) to embed.
"""

from __future__ import annotations

from orderflow.application.dto import UserDTO
from orderflow.domain.exceptions import (
    DuplicateEmailError,
    EntityNotFoundError,
    InvalidRequestError,
    ValidationError,
)
from orderflow.domain.model.user import User
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory


class RegisterUserHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str | None, email: str | None) -> UserDTO:
        try:
            user = User.create(name=name or "", email=email or "")
        except ValidationError as exc:
            raise InvalidRequestError(str(exc)) from exc

        with self._uow_factory() as uow:
            if uow.users.get_by_email(user.email) is not None:
                raise DuplicateEmailError(user.email)
            uow.users.add(user)
            uow.commit()
        return UserDTO.from_domain(user)


class ShowUserHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int) -> UserDTO:
        with self._uow_factory() as uow:
            user = uow.users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return UserDTO.from_domain(user)
