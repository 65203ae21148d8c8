import pytest

from orderflow.infrastructure.bootstrap import build_container
from orderflow.infrastructure.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'orderflow.db'}", log_level="WARNING")


@pytest.fixture
def container(settings):
    c = build_container(settings)
    yield c
    c.dispatcher.stop()
    c.engine.dispose()


@pytest.fixture
def seeded(container):
    """Ada (id 1), Bob (id 2) and a Mug (id 1, $10.00, 5 in stock)."""
    container.register_user().handle("Ada", "ada@example.com")
    container.register_user().handle("Bob", "bob@example.com")
    container.add_product().handle("Mug", "10.00", 5)
    return container
