"""User registration (stand-in for the identity service)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from orderflow.infrastructure.api.dependencies import get_container
from orderflow.infrastructure.api.schemas import CreateUserRequest
from orderflow.infrastructure.bootstrap import Container

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
def register_user(
    body: CreateUserRequest,
    container: Container = Depends(get_container),
) -> JSONResponse:
    user = container.register_user().handle(body.name, body.email)
    return JSONResponse(
        status_code=201,
        content={"message": "User registered successfully", "user": user.to_dict()},
    )
