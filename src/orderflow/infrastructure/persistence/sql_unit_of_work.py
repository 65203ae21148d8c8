"""SQLAlchemy Unit of Work: one session, one database transaction.

Everything done through the repositories of one unit is committed or
rolled back together, which is what makes "decrement stock + insert
order" all-or-nothing.
"""

from __future__ import annotations

import threading

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from orderflow.domain.repository.unit_of_work import UnitOfWork
from orderflow.infrastructure.persistence.orm import shares_one_connection
from orderflow.infrastructure.persistence.sql_order_repository import (
    SqlAlchemyOrderRepository,
)
from orderflow.infrastructure.persistence.sql_product_repository import (
    SqlAlchemyProductRepository,
)
from orderflow.infrastructure.persistence.sql_user_repository import (
    SqlAlchemyUserRepository,
)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """One session per unit.

    When every session rides on the same connection (in-memory SQLite),
    the units sharing *lock* run one at a time; otherwise one unit's
    commit or rollback would end the others' transactions too.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        lock: threading.RLock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._lock = lock
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        if self._lock is not None:
            self._lock.acquire()
        self._session = self._session_factory()
        self.products = SqlAlchemyProductRepository(self._session)
        self.orders = SqlAlchemyOrderRepository(self._session)
        self.users = SqlAlchemyUserRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            assert self._session is not None
            self._session.close()
            self._session = None
            if self._lock is not None:
                self._lock.release()

    def commit(self) -> None:
        assert self._session is not None, "unit of work not started"
        self._session.commit()

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()


def session_factory_for(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def unit_of_work_lock_for(engine: Engine) -> threading.RLock | None:
    """A lock serializing units of work, if *engine* needs one."""
    return threading.RLock() if shares_one_connection(engine) else None
