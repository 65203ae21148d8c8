"""Tests for the SQLAlchemy repositories and unit of work (SQLite file DB)."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from orderflow.domain.exceptions import DuplicateEmailError, InvalidRequestError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.model.product import Product
from orderflow.domain.model.user import User
from orderflow.domain.model.value_objects import Money, Quantity
from orderflow.infrastructure.persistence.orm import create_engine_for, init_db
from orderflow.infrastructure.persistence.sql_unit_of_work import unit_of_work_lock_for
from orderflow.infrastructure.persistence.sql_user_repository import SqlAlchemyUserRepository

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestProductRepository:

    def test_add_assigns_id_and_round_trips(self, container):
        with container.unit_of_work() as uow:
            product = Product.create("Mug", Money.of("19.99"), 4)
            uow.products.add(product)
            uow.commit()
        assert product.id == 1

        with container.unit_of_work() as uow:
            loaded = uow.products.get_by_id(1)
        assert loaded.name == "Mug"
        assert loaded.price == Money.of("19.99")
        assert loaded.stock == 4
        assert loaded.created_at.tzinfo is not None

    def test_missing_product(self, container):
        with container.unit_of_work() as uow:
            assert uow.products.get_by_id(99) is None

    def test_decrement_is_conditional(self, seeded):
        with seeded.unit_of_work() as uow:
            assert uow.products.decrement_stock(1, 3) is True
            assert uow.products.decrement_stock(1, 3) is False
            assert uow.products.decrement_stock(1, 2) is True
            assert uow.products.decrement_stock(99, 1) is False
            uow.commit()
        with seeded.unit_of_work() as uow:
            assert uow.products.get_by_id(1).stock == 0

    def test_search_filters(self, container):
        with container.unit_of_work() as uow:
            for days, name, price, stock in [
                (0, "Blue Mug", "10.00", 5),
                (1, "Desk Lamp", "45.00", 0),
                (2, "Red mug", "12.50", 2),
            ]:
                uow.products.add(Product(
                    id=None, name=name, price=Money.of(price), stock=stock,
                    created_at=BASE + timedelta(days=days),
                ))
            uow.commit()

        with container.unit_of_work() as uow:
            assert [p.id for p in uow.products.search()] == [3, 2, 1]
            assert [p.id for p in uow.products.search(text="MUG")] == [3, 1]
            assert [p.id for p in uow.products.search(in_stock=True)] == [3, 1]
            found = uow.products.search(min_price=Decimal("11"), max_price=Decimal("45"))
            assert [p.id for p in found] == [3, 2]

    def test_update_writes_catalog_fields(self, seeded):
        with seeded.unit_of_work() as uow:
            uow.products.update(1, price=Money.of("12.00"), stock=40)
            uow.commit()
        with seeded.unit_of_work() as uow:
            product = uow.products.get_by_id(1)
        assert product.name == "Mug"
        assert product.price == Money.of("12.00")
        assert product.stock == 40

    def test_update_leaves_unnamed_fields_alone(self, seeded):
        with seeded.unit_of_work() as uow:
            stale = uow.products.get_by_id(1)
            assert uow.products.decrement_stock(1, 2) is True
            uow.products.update(1, name="Big Mug")
            uow.commit()
        assert stale.stock == 5
        with seeded.unit_of_work() as uow:
            product = uow.products.get_by_id(1)
        assert product.name == "Big Mug"
        assert product.stock == 3

    def test_delete_unordered_product(self, seeded):
        with seeded.unit_of_work() as uow:
            assert uow.products.delete(1) is True
            assert uow.products.delete(99) is False
            uow.commit()
        with seeded.unit_of_work() as uow:
            assert uow.products.get_by_id(1) is None

    def test_delete_refused_while_orders_reference_it(self, seeded):
        seeded.create_order().handle(1, 1, 1)
        with seeded.unit_of_work() as uow:
            assert uow.products.delete(1) is False
            uow.commit()
        with seeded.unit_of_work() as uow:
            assert uow.products.get_by_id(1).stock == 4


class TestOrderRepository:

    def _order(self, user_id, minutes, status=OrderStatus.CONFIRMED):
        return Order(
            id=None, user_id=user_id, product_id=1, quantity=Quantity(1),
            total_price=Money.of("10.00"), status=status,
            created_at=BASE + timedelta(minutes=minutes),
        )

    def test_find_newest_first_with_filters(self, seeded):
        with seeded.unit_of_work() as uow:
            uow.orders.add(self._order(1, 0))
            uow.orders.add(self._order(2, 1, OrderStatus.SHIPPED))
            uow.orders.add(self._order(1, 2, OrderStatus.SHIPPED))
            uow.commit()

        with seeded.unit_of_work() as uow:
            assert [o.id for o in uow.orders.find()] == [3, 2, 1]
            assert [o.id for o in uow.orders.find(user_id=1)] == [3, 1]
            assert [o.id for o in uow.orders.find(status="shipped")] == [3, 2]
            assert uow.orders.find(status="archived") == []

    def test_update_status(self, seeded):
        with seeded.unit_of_work() as uow:
            order = self._order(1, 0)
            uow.orders.add(order)
            uow.commit()
        with seeded.unit_of_work() as uow:
            order = uow.orders.get_by_id(1)
            order.set_status(OrderStatus.DELIVERED)
            uow.orders.update_status(order)
            uow.commit()
        with seeded.unit_of_work() as uow:
            loaded = uow.orders.get_by_id(1)
        assert loaded.status == OrderStatus.DELIVERED
        assert loaded.total_price == Money.of("10.00")


class TestUserRepository:

    def test_lookup_by_email(self, seeded):
        with seeded.unit_of_work() as uow:
            assert uow.users.get_by_email("bob@example.com").id == 2
            assert uow.users.get_by_email("nobody@example.com") is None

    def test_email_is_unique(self, seeded):
        with pytest.raises(DuplicateEmailError, match="already registered"):
            with seeded.unit_of_work() as uow:
                uow.users.add(User(id=None, name="Ada again", email="ada@example.com"))
        with seeded.unit_of_work() as uow:
            assert uow.users.get_by_email("ada@example.com").name == "Ada"

    def test_registration_losing_the_email_check_race(self, seeded, monkeypatch):
        # Both requests passed the lookup; the unique constraint decides.
        monkeypatch.setattr(SqlAlchemyUserRepository, "get_by_email", lambda self, email: None)
        with pytest.raises(InvalidRequestError, match="already registered"):
            seeded.register_user().handle("Ada again", "ada@example.com")


class TestUnitOfWork:

    def test_exit_without_commit_rolls_back(self, seeded):
        with seeded.unit_of_work() as uow:
            uow.products.decrement_stock(1, 2)
            uow.orders.add(Order.create(1, uow.products.get_by_id(1), Quantity(2)))
        with seeded.unit_of_work() as uow:
            assert uow.products.get_by_id(1).stock == 5
            assert uow.orders.find() == []

    def test_exception_rolls_back(self, seeded):
        with pytest.raises(RuntimeError):
            with seeded.unit_of_work() as uow:
                uow.products.decrement_stock(1, 5)
                raise RuntimeError("boom")
        with seeded.unit_of_work() as uow:
            assert uow.products.get_by_id(1).stock == 5


class TestSchema:

    def test_negative_stock_rejected_by_database(self, tmp_path):
        engine = create_engine_for(f"sqlite:///{tmp_path / 'schema.db'}")
        init_db(engine)
        with engine.begin() as conn:
            conn.exec_driver_sql(
                "INSERT INTO products (name, price, stock, created_at) "
                "VALUES ('Mug', 1, 0, '2024-01-01 00:00:00')"
            )
        with pytest.raises(IntegrityError):
            with engine.begin() as conn:
                conn.exec_driver_sql("UPDATE products SET stock = -1")
        engine.dispose()

    def test_in_memory_database_shares_one_connection(self):
        engine = create_engine_for("sqlite://")
        init_db(engine)
        with engine.begin() as conn:
            conn.exec_driver_sql(
                "INSERT INTO users (name, email) VALUES ('Ada', 'ada@example.com')"
            )
        with engine.connect() as conn:
            assert conn.exec_driver_sql("SELECT count(*) FROM users").scalar() == 1
        engine.dispose()

    def test_only_the_shared_connection_engine_serializes_units(self, tmp_path):
        memory = create_engine_for("sqlite://")
        on_disk = create_engine_for(f"sqlite:///{tmp_path / 'file.db'}")
        assert unit_of_work_lock_for(memory) is not None
        assert unit_of_work_lock_for(on_disk) is None
        memory.dispose()
        on_disk.dispose()
