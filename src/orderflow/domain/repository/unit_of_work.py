"""Unit of Work port.

A unit of work groups repository calls into one all-or-nothing
transaction.  Leaving the ``with`` block without calling ``commit()``
(including by exception) rolls everything back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    products: ProductRepository
    orders: OrderRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change in this unit durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change.  Safe to call after commit."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
