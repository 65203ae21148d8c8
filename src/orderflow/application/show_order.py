"""Application service: Show Order use case (query)."""

from __future__ import annotations

from orderflow.application.dto import OrderDTO
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, user_id: int) -> OrderDTO:
        """Return one of the caller's orders.

        Someone else's order is reported exactly like a missing one so
        that order IDs owned by other users are not revealed.
        """
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None or not order.is_owned_by(user_id):
                raise EntityNotFoundError("Order not found")
            product = uow.products.get_by_id(order.product_id)
        return OrderDTO.from_domain(order, product=product)
