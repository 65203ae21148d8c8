"""Order endpoints: create, list, fetch, update status."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from orderflow.application.dto import UserDTO
from orderflow.infrastructure.api.dependencies import current_user, get_container
from orderflow.infrastructure.api.schemas import CreateOrderRequest, UpdateStatusRequest
from orderflow.infrastructure.bootstrap import Container

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("")
def create_order(
    body: CreateOrderRequest,
    user: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    """Buy ``quantity`` units of ``productId`` for the calling user.

    Returns 201 with the order enriched with user and product projections.
    """
    order = container.create_order().handle(user.id, body.product_id, body.quantity)
    return JSONResponse(
        status_code=201,
        content={"message": "Order created successfully", "order": order.to_dict()},
    )


@router.get("")
def list_own_orders(
    status: str | None = Query(default=None),
    user: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    orders = container.list_orders().handle(user.id, status=status)
    return {"orders": [o.to_dict() for o in orders], "count": len(orders)}


@router.get("/all")
def list_all_orders(
    status: str | None = Query(default=None),
    user_id: int | None = Query(default=None, alias="userId"),
    _: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    orders = container.list_all_orders().handle(status=status, user_id=user_id)
    return {"orders": [o.to_dict() for o in orders], "count": len(orders)}


@router.get("/{order_id}")
def get_order(
    order_id: int,
    user: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    order = container.show_order().handle(order_id, user.id)
    return {"order": order.to_dict()}


@router.put("/{order_id}/status")
def update_order_status(
    order_id: int,
    body: UpdateStatusRequest,
    _: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    order = container.update_order_status().handle(order_id, body.status)
    return {"message": "Order status updated successfully", "order": order.to_dict()}
