"""Application service: List Orders use cases (queries).

Both listings are newest first.  The status filter is an exact match on
the raw value, so an unknown status simply matches nothing.
"""

from __future__ import annotations

from orderflow.application.dto import OrderDTO
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory


class ListOrdersHandler:
    """The caller's own orders, each with its product projection."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: int, status: str | None = None) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.find(user_id=user_id, status=status or None)
            products = {}
            for order in orders:
                if order.product_id not in products:
                    products[order.product_id] = uow.products.get_by_id(order.product_id)
        return [
            OrderDTO.from_domain(order, product=products[order.product_id])
            for order in orders
        ]


class ListAllOrdersHandler:
    """Every order in the system, with user and product projections."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        status: str | None = None,
        user_id: int | None = None,
    ) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.find(user_id=user_id, status=status or None)
            users = {o.user_id: uow.users.get_by_id(o.user_id) for o in orders}
            products = {o.product_id: uow.products.get_by_id(o.product_id) for o in orders}
        return [
            OrderDTO.from_domain(
                order,
                user=users[order.user_id],
                product=products[order.product_id],
            )
            for order in orders
        ]
