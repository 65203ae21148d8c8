"""Application service: Update Order Status use case.

Validates the requested status against the declared set, moves the
Order aggregate and broadcasts ``order_status_updated``.  Stock is never
touched here: a cancelled order keeps its quantity reserved.
"""

from __future__ import annotations

import logging

from orderflow.application.dto import OrderDTO
from orderflow.application.events import emit
from orderflow.domain.exceptions import EntityNotFoundError, InvalidRequestError
from orderflow.domain.model.events import OrderStatusUpdated
from orderflow.domain.model.order import parse_status
from orderflow.domain.notification import EventPublisher
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        publisher: EventPublisher,
        strict: bool = False,
    ) -> None:
        self._uow_factory = uow_factory
        self._publisher = publisher
        self._strict = strict

    def handle(self, order_id: int, new_status: str | None) -> OrderDTO:
        if not new_status:
            raise InvalidRequestError("Status is required")

        status = parse_status(new_status)

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order not found")

            previous = order.status
            order.set_status(status, strict=self._strict)
            uow.orders.update_status(order)

            user = uow.users.get_by_id(order.user_id)
            product = uow.products.get_by_id(order.product_id)
            uow.commit()

        dto = OrderDTO.from_domain(order, user=user, product=product)
        logger.info(
            "order status updated",
            extra={"order_id": order_id, "from": previous.value, "to": status.value},
        )
        emit(
            self._publisher,
            OrderStatusUpdated(
                order_id=dto.id,
                new_status=dto.status,
                user=dto.user.to_dict() if dto.user else {},
                product=dto.product.to_dict() if dto.product else {},
            ),
        )
        return dto
