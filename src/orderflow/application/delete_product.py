"""Application service: Delete Product use case.

Orders keep a reference to their product, so only products that were
never ordered can be removed from the catalog.
"""

from __future__ import annotations

import logging

from orderflow.domain.exceptions import EntityNotFoundError, ProductInUseError
from orderflow.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> None:
        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError("Product not found")
            if not uow.products.delete(product_id):
                raise ProductInUseError(product_id)
            uow.commit()
        logger.info("product deleted", extra={"product_id": product_id})
