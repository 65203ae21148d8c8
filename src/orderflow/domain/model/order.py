"""Order aggregate — the core of the domain.

An Order is created by the fulfillment engine at the same moment its
quantity is taken out of stock.  It references, but does not own, the
product and the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderflow.domain.exceptions import IllegalTransitionError, InvalidStatusError
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


VALID_STATUSES: list[str] = [s.value for s in OrderStatus]

TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

# Forward-only graph, only consulted in strict mode.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def parse_status(raw: str) -> OrderStatus:
    """Map a raw status string onto ``OrderStatus``.

    This is the single membership check for status values; anything
    outside the five declared values raises ``InvalidStatusError``.
    """
    try:
        return OrderStatus(raw)
    except ValueError:
        raise InvalidStatusError(str(raw), list(VALID_STATUSES)) from None


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders; it snapshots the
    product price.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: int
    product_id: int
    quantity: Quantity
    total_price: Money  # locked at order-creation time
    status: OrderStatus = OrderStatus.CONFIRMED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user_id: int, product: Product, quantity: Quantity) -> Order:
        """Create a new order, confirmed on the spot.

        ``pending`` is never produced here: stock is taken in the same
        unit of work, so the order is confirmed as soon as it exists.
        """
        return Order(
            id=None,
            user_id=user_id,
            product_id=product.id,  # type: ignore[arg-type]
            quantity=quantity,
            total_price=product.price * quantity.value,
            status=OrderStatus.CONFIRMED,
        )

    # --- State transitions ----------------------------------------------------

    def set_status(self, new_status: OrderStatus, strict: bool = False) -> None:
        """Move the order to *new_status*.

        In lenient mode any declared status is accepted from any current
        status.  In strict mode only the forward moves listed in
        ``ALLOWED_TRANSITIONS`` (plus re-applying the current status)
        are accepted.
        """
        if strict and new_status != self.status:
            allowed = ALLOWED_TRANSITIONS[self.status]
            if new_status not in allowed:
                raise IllegalTransitionError(
                    current=self.status.value,
                    requested=new_status.value,
                    allowed=[s.value for s in OrderStatus if s in allowed],
                )
        self.status = new_status

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
