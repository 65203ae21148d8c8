"""Concurrent order creation against the in-memory store.

Requests run on real threads; the fake unit of work serializes them the
way a single-writer store does.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from orderflow.application.create_order import CreateOrderHandler
from orderflow.domain.exceptions import InsufficientStockError
from orderflow.domain.model.product import Product
from orderflow.domain.model.user import User
from orderflow.domain.model.value_objects import Money
from tests.fakes import FakeDatabase, RecordingPublisher, uow_factory


def _race(stock: int, requests: int, quantity: int = 1):
    db = FakeDatabase(
        products=[Product(id=None, name="Mug", price=Money.of("10.00"), stock=stock)],
        users=[User(id=None, name="Ada", email="ada@example.com")],
    )
    publisher = RecordingPublisher()
    handler = CreateOrderHandler(uow_factory(db), publisher)

    def place(_):
        try:
            return handler.handle(1, 1, quantity)
        except InsufficientStockError as exc:
            return exc

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(place, range(requests)))
    return db, publisher, results


class TestConcurrentOrders:

    def test_two_buyers_one_unit(self):
        db, _, results = _race(stock=1, requests=2)
        failures = [r for r in results if isinstance(r, InsufficientStockError)]
        assert len(failures) == 1
        assert failures[0].available_stock == 0
        assert db.products[1].stock == 0
        assert len(db.orders) == 1

    @pytest.mark.parametrize("stock,requests", [(5, 20), (20, 5), (10, 10)])
    def test_exactly_min_n_s_succeed(self, stock, requests):
        db, publisher, results = _race(stock=stock, requests=requests)
        expected = min(stock, requests)
        successes = [r for r in results if not isinstance(r, Exception)]
        assert len(successes) == expected
        assert len(results) - len(successes) == requests - expected
        assert db.products[1].stock == stock - expected
        assert len(publisher.named("new_order")) == expected

    def test_stock_matches_committed_orders(self):
        db, _, _ = _race(stock=7, requests=12, quantity=2)
        taken = sum(o.quantity.value for o in db.orders.values())
        assert db.products[1].stock == 7 - taken
        assert db.products[1].stock >= 0
