"""Application service: Update Product use case.

Catalog edit of name, price and/or stock.  Price changes do NOT affect
existing orders; they captured their total price at creation time.
"""

from __future__ import annotations

from typing import Any

from orderflow.application.dto import ProductDTO
from orderflow.application.parsing import parse_int
from orderflow.domain.exceptions import (
    EntityNotFoundError,
    InvalidRequestError,
    ValidationError,
)
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: Any = None,
        stock: Any = None,
    ) -> ProductDTO:
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found")

            edits: dict[str, Any] = {}
            try:
                if name is not None:
                    product.rename(name)
                    edits["name"] = product.name
                if price is not None:
                    product.update_price(Money.of(price))
                    edits["price"] = product.price
                if stock is not None:
                    product.set_stock(parse_int(stock, "Stock"))
                    edits["stock"] = product.stock
            except ValidationError as exc:
                raise InvalidRequestError(str(exc)) from exc

            # Only edited columns are written; stock taken by orders since
            # the read above is kept unless a restock overwrites it.
            uow.products.update(product_id, **edits)
            product = uow.products.get_by_id(product_id)
            uow.commit()
        return ProductDTO.from_domain(product)
