"""Domain events raised by the fulfillment engine.

Events are immutable facts, named in the past tense.  ``name`` is the
wire-level event name observers subscribe to and ``payload()`` the body
they receive.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar


@dataclass(frozen=True)
class Event(ABC):
    """Base class for all domain events."""

    name: ClassVar[str] = "event"

    @abstractmethod
    def payload(self) -> dict[str, Any]:
        """The camelCase body delivered to observers."""


@dataclass(frozen=True)
class NewOrder(Event):
    """An order was created and its stock taken."""

    name: ClassVar[str] = "new_order"

    order_id: int
    user: dict[str, Any]
    product: dict[str, Any]
    quantity: int
    total_price: float
    timestamp: datetime

    def payload(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "user": dict(self.user),
            "product": dict(self.product),
            "quantity": self.quantity,
            "totalPrice": self.total_price,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class OrderStatusUpdated(Event):
    """An order moved to a new status."""

    name: ClassVar[str] = "order_status_updated"

    order_id: int
    new_status: str
    user: dict[str, Any]
    product: dict[str, Any]

    def payload(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "newStatus": self.new_status,
            "user": dict(self.user),
            "product": dict(self.product),
        }
