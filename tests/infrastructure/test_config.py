"""Tests for settings and logging setup."""

import json
import logging

from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.logging_setup import (
    REQUEST_ID_CTX,
    RequestIdFilter,
    configure_logging,
)


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.database_url.startswith("sqlite:///")
        assert settings.database_url.endswith("orderflow.db")
        assert settings.strict_transitions is False
        assert settings.order_attempts == 2
        assert settings.port == 3000

    def test_environment_overrides(self):
        settings = Settings.from_env({
            "ORDERFLOW_DATABASE_URL": "sqlite://",
            "ORDERFLOW_LOG_LEVEL": "debug",
            "ORDERFLOW_STRICT_TRANSITIONS": "yes",
            "ORDERFLOW_ORDER_ATTEMPTS": "3",
            "ORDERFLOW_CORS_ORIGINS": "http://a.test, http://b.test",
            "ORDERFLOW_PORT": "8080",
        })
        assert settings.database_url == "sqlite://"
        assert settings.log_level == "DEBUG"
        assert settings.strict_transitions is True
        assert settings.order_attempts == 3
        assert settings.cors_origins == ("http://a.test", "http://b.test")
        assert settings.port == 8080


class TestLogging:

    def test_request_id_attached_to_records(self):
        record = logging.LogRecord("orderflow", logging.INFO, __file__, 1, "hello", None, None)
        token = REQUEST_ID_CTX.set("abc-123")
        try:
            RequestIdFilter().filter(record)
        finally:
            REQUEST_ID_CTX.reset(token)
        assert record.request_id == "abc-123"

    def test_placeholder_outside_requests(self):
        record = logging.LogRecord("orderflow", logging.INFO, __file__, 1, "hello", None, None)
        RequestIdFilter().filter(record)
        assert record.request_id == "-"

    def test_configure_is_idempotent_and_emits_json(self, capsys):
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        # Start from a fresh handler bound to the captured stderr.
        for handler in before:
            if handler.get_name() == "orderflow-json":
                root.removeHandler(handler)
        try:
            configure_logging("INFO")
            configure_logging("INFO")
            ours = [h for h in root.handlers if h.get_name() == "orderflow-json"]
            assert len(ours) == 1

            logging.getLogger("orderflow.test").info("order created", extra={"order_id": 7})
            line = capsys.readouterr().err.strip().splitlines()[-1]
            data = json.loads(line)
            assert data["message"] == "order created"
            assert data["order_id"] == 7
            assert data["request_id"] == "-"
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
            for handler in before:
                if handler not in root.handlers:
                    root.addHandler(handler)
            root.setLevel(level)
