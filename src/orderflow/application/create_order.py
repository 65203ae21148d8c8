"""Application service: Create Order use case (the fulfillment engine).

Orchestrates the flow between the unit of work, the stock reservation
domain service and the Order aggregate.  This is the only place that
coordinates multiple aggregates (Product stock + Order creation), and
the only place where concurrent requests can interact.
"""

from __future__ import annotations

import logging
from typing import Any

from orderflow.application.dto import OrderDTO
from orderflow.application.events import emit
from orderflow.application.parsing import parse_int
from orderflow.domain.exceptions import (
    EntityNotFoundError,
    InvalidRequestError,
    StockConflictError,
)
from orderflow.domain.model.events import NewOrder
from orderflow.domain.model.order import Order
from orderflow.domain.model.value_objects import Quantity
from orderflow.domain.notification import EventPublisher
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory
from orderflow.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        publisher: EventPublisher,
        max_attempts: int = 2,
    ) -> None:
        self._uow_factory = uow_factory
        self._publisher = publisher
        self._max_attempts = max(1, max_attempts)

    def handle(self, user_id: int, product_id: Any, quantity: Any) -> OrderDTO:
        """Create a confirmed order and take its stock.

        Steps:
        1. Reject missing or malformed input (``InvalidRequestError``).
        2. In one unit of work: look the product up, check and decrement
           stock, append the order, commit.
        3. If the decrement lost a race, rerun step 2 against the
           refreshed stock, up to ``max_attempts`` times in total.
        4. Publish ``new_order`` and return the enriched order.
        """
        if product_id in (None, "") or quantity in (None, ""):
            raise InvalidRequestError("Product ID and quantity are required")

        qty = parse_int(quantity, "Quantity")
        if qty <= 0:
            raise InvalidRequestError("Quantity must be greater than 0")
        pid = parse_int(product_id, "Product ID")

        attempt = 1
        while True:
            try:
                dto = self._place(user_id, pid, Quantity(qty))
                break
            except StockConflictError:
                if attempt >= self._max_attempts:
                    raise
                attempt += 1
                logger.info(
                    "retrying order after stock conflict",
                    extra={"product_id": pid, "attempt": attempt},
                )

        logger.info(
            "order created",
            extra={"order_id": dto.id, "product_id": pid, "quantity": qty},
        )
        emit(
            self._publisher,
            NewOrder(
                order_id=dto.id,
                user=dto.user.to_dict(),  # type: ignore[union-attr]
                product=dto.product.to_dict(),  # type: ignore[union-attr]
                quantity=dto.quantity,
                total_price=dto.total_price,
                timestamp=dto.created_at,
            ),
        )
        return dto

    def _place(self, user_id: int, product_id: int, quantity: Quantity) -> OrderDTO:
        with self._uow_factory() as uow:
            product = StockReservationService(uow.products).reserve(product_id, quantity)

            user = uow.users.get_by_id(user_id)
            if user is None:
                raise EntityNotFoundError(f"User #{user_id} not found")

            order = Order.create(user_id=user_id, product=product, quantity=quantity)
            uow.orders.add(order)
            uow.commit()

        return OrderDTO.from_domain(order, user=user, product=product)
