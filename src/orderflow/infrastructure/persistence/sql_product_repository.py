"""SQLAlchemy-backed implementation of ProductRepository (inventory store)."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.infrastructure.persistence.orm import OrderRow, ProductRow, as_utc


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def search(
        self,
        text: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        in_stock: bool = False,
    ) -> list[Product]:
        stmt = select(ProductRow)
        if text:
            stmt = stmt.where(ProductRow.name.ilike(f"%{text}%"))
        if min_price is not None:
            stmt = stmt.where(ProductRow.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(ProductRow.price <= max_price)
        if in_stock:
            stmt = stmt.where(ProductRow.stock > 0)
        stmt = stmt.order_by(ProductRow.created_at.desc(), ProductRow.id.desc())
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def add(self, product: Product) -> None:
        row = ProductRow(
            name=product.name,
            price=product.price.amount,
            stock=product.stock,
            created_at=product.created_at,
        )
        self._session.add(row)
        self._session.flush()
        product.id = row.id

    def update(
        self,
        product_id: int,
        name: str | None = None,
        price: Money | None = None,
        stock: int | None = None,
    ) -> None:
        values: dict = {}
        if name is not None:
            values["name"] = name
        if price is not None:
            values["price"] = price.amount
        if stock is not None:
            values["stock"] = stock
        if not values:
            return
        self._session.execute(
            update(ProductRow)
            .where(ProductRow.id == product_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

    def delete(self, product_id: int) -> bool:
        # The NOT EXISTS is evaluated with the delete, so an order committed
        # in between still blocks it.
        referenced = select(OrderRow.id).where(OrderRow.product_id == product_id).exists()
        result = self._session.execute(
            delete(ProductRow)
            .where(ProductRow.id == product_id, ~referenced)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def decrement_stock(self, product_id: int, amount: int) -> bool:
        # Compare-and-swap: the WHERE clause re-checks stock at write time.
        result = self._session.execute(
            update(ProductRow)
            .where(ProductRow.id == product_id, ProductRow.stock >= amount)
            .values(stock=ProductRow.stock - amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(Decimal(row.price)),
            stock=row.stock,
            created_at=as_utc(row.created_at),
        )
