"""Tests for the click command line (CliRunner against a SQLite file DB)."""

import pytest
from click.testing import CliRunner

from orderflow.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("ORDERFLOW_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args))

    invoke("user", "add", "--name", "Ada", "--email", "ada@example.com")
    invoke("product", "add", "--name", "Mug", "--price", "10.00", "--stock", "5")
    return invoke


class TestProductCommands:

    def test_list(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Mug" in result.output
        assert "10.00" in result.output

    def test_update_requires_a_field(self, run):
        result = run("product", "update", "--id", "1")
        assert result.exit_code != 0
        assert "Nothing to update" in result.output

    def test_restock(self, run):
        result = run("product", "update", "--id", "1", "--stock", "12")
        assert result.exit_code == 0
        assert "(12 in stock)" in result.output

    def test_delete(self, run):
        run("product", "add", "--name", "Lamp", "--price", "45", "--stock", "0")
        result = run("product", "delete", "--id", "2")
        assert result.exit_code == 0
        assert "Product #2 deleted." in result.output
        assert "Lamp" not in run("product", "list").output

    def test_delete_ordered_product_refused(self, run):
        run("order", "create", "--user", "1", "--product", "1", "--quantity", "1")
        result = run("product", "delete", "--id", "1")
        assert result.exit_code != 0
        assert "has orders and cannot be deleted" in result.output

    def test_bad_price(self, run):
        result = run("product", "add", "--name", "Lamp", "--price", "0", "--stock", "1")
        assert result.exit_code != 0
        assert "Price must be greater than 0" in result.output


class TestOrderCommands:

    def test_create_and_show(self, run):
        result = run("order", "create", "--user", "1", "--product", "1", "--quantity", "3")
        assert result.exit_code == 0, result.output
        assert "Order #1 created" in result.output
        assert "30.00" in result.output

        result = run("order", "show", "--id", "1", "--user", "1")
        assert result.exit_code == 0
        assert "status=confirmed" in result.output

    def test_insufficient_stock(self, run):
        result = run("order", "create", "--user", "1", "--product", "1", "--quantity", "9")
        assert result.exit_code != 0
        assert "Insufficient stock (available: 5)" in result.output

    def test_status_and_listing(self, run):
        run("order", "create", "--user", "1", "--product", "1", "--quantity", "1")
        result = run("order", "status", "--id", "1", "--status", "shipped")
        assert result.exit_code == 0
        assert "Order #1 is now shipped." in result.output

        result = run("order", "list", "--user", "1", "--status", "shipped")
        assert "1 order(s)" in result.output
        result = run("order", "all", "--status", "cancelled")
        assert "No orders found." in result.output

    def test_invalid_status(self, run):
        run("order", "create", "--user", "1", "--product", "1", "--quantity", "1")
        result = run("order", "status", "--id", "1", "--status", "archived")
        assert result.exit_code != 0
        assert "Invalid status 'archived'" in result.output

    def test_show_someone_elses_order(self, run):
        run("order", "create", "--user", "1", "--product", "1", "--quantity", "1")
        result = run("order", "show", "--id", "1", "--user", "2")
        assert result.exit_code != 0
        assert "Order not found" in result.output


class TestUserCommands:

    def test_duplicate_email(self, run):
        result = run("user", "add", "--name", "Ada", "--email", "ADA@example.com")
        assert result.exit_code != 0
        assert "already registered" in result.output
