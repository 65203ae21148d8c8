"""Abstract repository for Order aggregate (the order ledger).

Orders are appended once and afterwards only their status changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append a new order and assign its ID."""

    @abstractmethod
    def update_status(self, order: Order) -> None:
        """Persist the status of an existing order."""

    @abstractmethod
    def find(
        self,
        user_id: int | None = None,
        status: str | None = None,
    ) -> list[Order]:
        """Return orders matching the filters, newest first."""
