"""Application service: List / Show Product use cases (queries)."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from orderflow.application.dto import ProductDTO
from orderflow.domain.exceptions import EntityNotFoundError, InvalidRequestError
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory


def _price_bound(raw: str | float | None, label: str) -> Decimal | None:
    if raw in (None, ""):
        return None
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise InvalidRequestError(f"Invalid {label}: {raw!r}") from exc


class ListProductsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        search: str | None = None,
        min_price: str | float | None = None,
        max_price: str | float | None = None,
        in_stock: bool = False,
    ) -> list[ProductDTO]:
        """Search the catalog, newest first.

        ``search`` is a case-insensitive substring match on the name;
        ``in_stock`` keeps only products with stock left.
        """
        low = _price_bound(min_price, "minPrice")
        high = _price_bound(max_price, "maxPrice")
        with self._uow_factory() as uow:
            products = uow.products.search(
                text=search or None,
                min_price=low,
                max_price=high,
                in_stock=in_stock,
            )
        return [ProductDTO.from_domain(p) for p in products]


class ShowProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> ProductDTO:
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return ProductDTO.from_domain(product)
