"""SQLAlchemy-backed implementation of OrderRepository (order ledger)."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.model.value_objects import Money, Quantity
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.infrastructure.persistence.orm import OrderRow, as_utc


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.get(OrderRow, order_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def add(self, order: Order) -> None:
        row = OrderRow(
            user_id=order.user_id,
            product_id=order.product_id,
            quantity=order.quantity.value,
            total_price=order.total_price.amount,
            status=order.status.value,
            created_at=order.created_at,
        )
        self._session.add(row)
        self._session.flush()
        order.id = row.id

    def update_status(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is None:
            raise EntityNotFoundError(f"Order #{order.id} not found")
        row.status = order.status.value
        self._session.flush()

    def find(
        self,
        user_id: int | None = None,
        status: str | None = None,
    ) -> list[Order]:
        stmt = select(OrderRow)
        if user_id is not None:
            stmt = stmt.where(OrderRow.user_id == user_id)
        if status is not None:
            stmt = stmt.where(OrderRow.status == status)
        stmt = stmt.order_by(OrderRow.created_at.desc(), OrderRow.id.desc())
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            product_id=row.product_id,
            quantity=Quantity(row.quantity),
            total_price=Money(Decimal(row.total_price)),
            status=OrderStatus(row.status),
            created_at=as_utc(row.created_at),
        )
