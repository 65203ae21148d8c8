"""Structured JSON logging with per-request correlation.

``configure_logging()`` installs a single JSON handler on the root
logger.  ``RequestIdFilter`` copies the current request id (set by the
HTTP middleware through ``REQUEST_ID_CTX``) onto every record so the
formatter can reference ``%(request_id)s``.
"""

from __future__ import annotations

import contextvars
import logging
from logging import Filter, LogRecord

from pythonjsonlogger.json import JsonFormatter

REQUEST_ID_CTX: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s"

_HANDLER_NAME = "orderflow-json"


class RequestIdFilter(Filter):
    """Attach a ``request_id`` attribute to log records.

    Outside of a request the placeholder "-" is used.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = REQUEST_ID_CTX.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the root logger (idempotent)."""
    root = logging.getLogger()
    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            break
    else:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(JsonFormatter(LOG_FORMAT))
        handler.addFilter(RequestIdFilter())
        root.addHandler(handler)
    root.setLevel(level)
