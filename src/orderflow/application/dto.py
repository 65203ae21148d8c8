"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI edges and the application layer
without exposing domain internals.  ``to_dict()`` produces the camelCase
shape that is the externally observable contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from orderflow.domain.model.order import Order
from orderflow.domain.model.product import Product
from orderflow.domain.model.user import User


@dataclass(frozen=True)
class UserDTO:
    """Projection of a user: id, name, email."""

    id: int
    name: str
    email: str

    @staticmethod
    def from_domain(user: User) -> UserDTO:
        return UserDTO(id=user.id, name=user.name, email=user.email)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class ProductSummaryDTO:
    """Projection of a product embedded in an order: id, name, price."""

    id: int
    name: str
    price: float

    @staticmethod
    def from_domain(product: Product) -> ProductSummaryDTO:
        return ProductSummaryDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=float(product.price),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price}


@dataclass(frozen=True)
class ProductDTO:
    """Output: a full catalog entry."""

    id: int
    name: str
    price: float
    stock: int
    created_at: datetime

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=float(product.price),
            stock=product.stock,
            created_at=product.created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order, optionally enriched with projections."""

    id: int
    user_id: int
    product_id: int
    quantity: int
    total_price: float
    status: str
    created_at: datetime
    user: UserDTO | None = None
    product: ProductSummaryDTO | None = None

    @staticmethod
    def from_domain(
        order: Order,
        user: User | None = None,
        product: Product | None = None,
    ) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            product_id=order.product_id,
            quantity=order.quantity.value,
            total_price=float(order.total_price),
            status=order.status.value,
            created_at=order.created_at,
            user=UserDTO.from_domain(user) if user is not None else None,
            product=ProductSummaryDTO.from_domain(product) if product is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "userId": self.user_id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "totalPrice": self.total_price,
            "status": self.status,
            "createdAt": self.created_at.isoformat(),
        }
        if self.user is not None:
            data["user"] = self.user.to_dict()
        if self.product is not None:
            data["product"] = self.product.to_dict()
        return data
