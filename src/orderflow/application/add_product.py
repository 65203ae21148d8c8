"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any

from orderflow.application.dto import ProductDTO
from orderflow.application.parsing import parse_int
from orderflow.domain.exceptions import InvalidRequestError, ValidationError
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str | None, price: Any, stock: Any) -> ProductDTO:
        """Add a new product to the catalog."""
        if not name or price in (None, "") or stock in (None, ""):
            raise InvalidRequestError("Name, price, and stock are required")

        try:
            product = Product.create(
                name=name,
                price=Money.of(price),
                stock=parse_int(stock, "Stock"),
            )
        except ValidationError as exc:
            raise InvalidRequestError(str(exc)) from exc

        with self._uow_factory() as uow:
            uow.products.add(product)
            uow.commit()
        return ProductDTO.from_domain(product)
