"""Domain service: Stock Reservation.

This service takes stock for a new order.  It lives in the domain layer
because the no-overselling rule is a core business rule, not just
orchestration.

The two-phase approach (validate-then-mutate) fails fast on the stock
that was read, then relies on the repository's conditional decrement to
catch a racing request that consumed the stock in between.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    StockConflictError,
)
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Quantity
from orderflow.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockReservationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(self, product_id: int, quantity: Quantity) -> Product:
        """Take *quantity* units of a product out of stock.

        Phase 1 — load and validate: the product must exist and its
                  stock must cover the quantity.
        Phase 2 — conditional decrement: if the stock changed since
                  phase 1 the decrement refuses and ``StockConflictError``
                  is raised so the caller's unit of work rolls back.

        Returns the product as it was read in phase 1 (its price is the
        one the order is charged at).
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        if not product.can_supply(quantity.value):
            raise InsufficientStockError(available_stock=product.stock)

        if not self._product_repo.decrement_stock(product_id, quantity.value):
            logger.info(
                "stock decrement lost a race",
                extra={"product_id": product_id, "quantity": quantity.value},
            )
            raise StockConflictError(
                f"Stock for product #{product_id} changed while ordering"
            )
        return product
