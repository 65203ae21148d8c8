"""Pydantic request bodies for the HTTP API.

Fields are loose (``Any``): presence and type checks are
made by the application handlers so that each failure maps onto the
documented error (for example "Product ID and quantity are required")
instead of a generic validation error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateOrderRequest(BaseModel):
    """Body of ``POST /orders``.

    Attributes:
        product_id: Product to buy (``productId`` on the wire).
        quantity: Positive integer number of units.
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: Any = Field(default=None, alias="productId")
    quantity: Any = None


class UpdateStatusRequest(BaseModel):
    """Body of ``PUT /orders/{id}/status``."""

    status: Any = None


class CreateProductRequest(BaseModel):
    name: str | None = None
    price: Any = None
    stock: Any = None


class UpdateProductRequest(BaseModel):
    name: str | None = None
    price: Any = None
    stock: Any = None


class CreateUserRequest(BaseModel):
    name: str | None = None
    email: str | None = None
