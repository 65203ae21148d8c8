"""FastAPI dependencies: the container and the calling user."""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Request

from orderflow.application.dto import UserDTO
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def current_user(
    x_user_id: str | None = Header(default=None),
    container: Container = Depends(get_container),
) -> UserDTO:
    """Resolve the trusted ``X-User-Id`` header to a user.

    Verifying who sent the header is the job of the identity layer in
    front of this service.
    """
    if x_user_id is None or not x_user_id.strip().isdigit():
        raise HTTPException(status_code=401, detail="Authentication required")
    try:
        return container.show_user().handle(int(x_user_id))
    except EntityNotFoundError:
        raise HTTPException(status_code=401, detail="Unknown user") from None
