"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Engine

from orderflow.application.add_product import AddProductHandler
from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.delete_product import DeleteProductHandler
from orderflow.application.list_orders import ListAllOrdersHandler, ListOrdersHandler
from orderflow.application.list_products import ListProductsHandler, ShowProductHandler
from orderflow.application.register_user import RegisterUserHandler, ShowUserHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.application.update_order_status import UpdateOrderStatusHandler
from orderflow.application.update_product import UpdateProductHandler
from orderflow.domain.repository.unit_of_work import UnitOfWork
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.notifications.dispatcher import QueueEventDispatcher
from orderflow.infrastructure.persistence.orm import create_engine_for, init_db
from orderflow.infrastructure.persistence.sql_unit_of_work import (
    SqlAlchemyUnitOfWork,
    session_factory_for,
    unit_of_work_lock_for,
)


@dataclass
class Container:

    settings: Settings
    engine: Engine
    dispatcher: QueueEventDispatcher

    def __post_init__(self) -> None:
        self._session_factory = session_factory_for(self.engine)
        self._uow_lock = unit_of_work_lock_for(self.engine)

    def unit_of_work(self) -> UnitOfWork:
        return SqlAlchemyUnitOfWork(self._session_factory, self._uow_lock)

    # --- Handlers -------------------------------------------------------------

    def create_order(self) -> CreateOrderHandler:
        return CreateOrderHandler(
            self.unit_of_work,
            self.dispatcher,
            max_attempts=self.settings.order_attempts,
        )

    def update_order_status(self) -> UpdateOrderStatusHandler:
        return UpdateOrderStatusHandler(
            self.unit_of_work,
            self.dispatcher,
            strict=self.settings.strict_transitions,
        )

    def list_orders(self) -> ListOrdersHandler:
        return ListOrdersHandler(self.unit_of_work)

    def list_all_orders(self) -> ListAllOrdersHandler:
        return ListAllOrdersHandler(self.unit_of_work)

    def show_order(self) -> ShowOrderHandler:
        return ShowOrderHandler(self.unit_of_work)

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.unit_of_work)

    def update_product(self) -> UpdateProductHandler:
        return UpdateProductHandler(self.unit_of_work)

    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(self.unit_of_work)

    def list_products(self) -> ListProductsHandler:
        return ListProductsHandler(self.unit_of_work)

    def show_product(self) -> ShowProductHandler:
        return ShowProductHandler(self.unit_of_work)

    def register_user(self) -> RegisterUserHandler:
        return RegisterUserHandler(self.unit_of_work)

    def show_user(self) -> ShowUserHandler:
        return ShowUserHandler(self.unit_of_work)


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings.from_env()
    engine = create_engine_for(settings.database_url)
    init_db(engine)
    return Container(
        settings=settings,
        engine=engine,
        dispatcher=QueueEventDispatcher(maxsize=settings.event_queue_size),
    )
