"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is replenished by catalog edits and consumed by
fulfillment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is strictly positive
    - ``stock`` is never negative

    ``stock`` is only ever lowered by the repository's atomic
    ``decrement_stock``; ``can_supply()`` is the read-side check done
    before it.
    """

    id: int | None
    name: str
    price: Money
    stock: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, price: Money, stock: int) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not price.is_positive:
            raise ValidationError("Price must be greater than 0")
        _check_stock(stock)
        return Product(id=None, name=name.strip(), price=price, stock=stock)

    def can_supply(self, quantity: int) -> bool:
        return self.stock >= quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture the total price at creation time.
        """
        if not new_price.is_positive:
            raise ValidationError("Price must be greater than 0")
        self.price = new_price

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()

    def set_stock(self, stock: int) -> None:
        """Catalog edit: overwrite the stock level (restock or correction)."""
        _check_stock(stock)
        self.stock = stock


def _check_stock(stock: int) -> None:
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise ValidationError("Stock must be an integer")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")
