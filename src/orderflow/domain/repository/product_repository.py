"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The SQLAlchemy implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def search(
        self,
        text: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        in_stock: bool = False,
    ) -> list[Product]:
        """Return matching products, newest first."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product and assign its ID."""

    @abstractmethod
    def update(
        self,
        product_id: int,
        name: str | None = None,
        price: Money | None = None,
        stock: int | None = None,
    ) -> None:
        """Write the given catalog fields of an existing product.

        Fields left as None are not written, so a rename or a price change
        never carries a stale stock value over a concurrent decrement.
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product that no order references.

        Returns False, with no change, if the product is missing or an
        order refers to it.
        """

    @abstractmethod
    def decrement_stock(self, product_id: int, amount: int) -> bool:
        """Atomically take *amount* units out of stock.

        Compare-and-swap semantics: returns False, with no change, if the
        product is missing or its stock no longer covers *amount*.
        """
