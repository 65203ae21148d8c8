"""Tests for the order read paths: own listing, admin listing, single fetch."""

from datetime import datetime, timedelta, timezone

import pytest

from orderflow.application.list_orders import ListAllOrdersHandler, ListOrdersHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.model.product import Product
from orderflow.domain.model.user import User
from orderflow.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeDatabase, FakeOrderRepository, uow_factory

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _setup():
    """Ada (1) owns orders 1 and 3, Bob (2) owns order 2; order 3 is newest."""
    db = FakeDatabase(
        products=[
            Product(id=None, name="Mug", price=Money.of("10.00"), stock=50),
            Product(id=None, name="Lamp", price=Money.of("45.00"), stock=50),
        ],
        users=[
            User(id=None, name="Ada", email="ada@example.com"),
            User(id=None, name="Bob", email="bob@example.com"),
        ],
    )
    orders = FakeOrderRepository(db)
    for minutes, user_id, product_id, status in [
        (0, 1, 1, OrderStatus.CONFIRMED),
        (1, 2, 2, OrderStatus.SHIPPED),
        (2, 1, 2, OrderStatus.SHIPPED),
    ]:
        orders.add(Order(
            id=None,
            user_id=user_id,
            product_id=product_id,
            quantity=Quantity(1),
            total_price=Money.of("10.00"),
            status=status,
            created_at=BASE + timedelta(minutes=minutes),
        ))
    return db


class TestListOwnOrders:

    def test_only_callers_orders_newest_first(self):
        handler = ListOrdersHandler(uow_factory(_setup()))
        assert [o.id for o in handler.handle(1)] == [3, 1]

    def test_status_filter(self):
        handler = ListOrdersHandler(uow_factory(_setup()))
        assert [o.id for o in handler.handle(1, status="shipped")] == [3]

    def test_unknown_status_matches_nothing(self):
        handler = ListOrdersHandler(uow_factory(_setup()))
        assert handler.handle(1, status="archived") == []

    def test_product_projection_only(self):
        handler = ListOrdersHandler(uow_factory(_setup()))
        data = handler.handle(1)[0].to_dict()
        assert data["product"] == {"id": 2, "name": "Lamp", "price": 45.0}
        assert "user" not in data

    def test_empty_for_user_without_orders(self):
        db = _setup()
        handler = ListOrdersHandler(uow_factory(db))
        assert handler.handle(99) == []


class TestListAllOrders:

    def test_every_order_newest_first(self):
        handler = ListAllOrdersHandler(uow_factory(_setup()))
        assert [o.id for o in handler.handle()] == [3, 2, 1]

    def test_user_and_product_projections(self):
        handler = ListAllOrdersHandler(uow_factory(_setup()))
        data = handler.handle()[1].to_dict()
        assert data["user"] == {"id": 2, "name": "Bob", "email": "bob@example.com"}
        assert data["product"]["name"] == "Lamp"

    def test_filters_combine(self):
        handler = ListAllOrdersHandler(uow_factory(_setup()))
        assert [o.id for o in handler.handle(status="shipped")] == [3, 2]
        assert [o.id for o in handler.handle(status="shipped", user_id=2)] == [2]


class TestShowOrder:

    def test_owner_sees_order(self):
        handler = ShowOrderHandler(uow_factory(_setup()))
        dto = handler.handle(1, user_id=1)
        assert dto.id == 1
        assert dto.product.name == "Mug"

    def test_other_users_order_looks_missing(self):
        handler = ShowOrderHandler(uow_factory(_setup()))
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            handler.handle(2, user_id=1)

    def test_unknown_order(self):
        handler = ShowOrderHandler(uow_factory(_setup()))
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            handler.handle(42, user_id=1)

    def test_repeated_reads_are_identical(self):
        handler = ShowOrderHandler(uow_factory(_setup()))
        assert handler.handle(3, user_id=1) == handler.handle(3, user_id=1)
