"""Runtime configuration, read once from environment variables.

| Variable                       | Default                         |
|--------------------------------|---------------------------------|
| ORDERFLOW_DATABASE_URL         | sqlite file under ``data/``     |
| ORDERFLOW_LOG_LEVEL            | INFO                            |
| ORDERFLOW_STRICT_TRANSITIONS   | false                           |
| ORDERFLOW_ORDER_ATTEMPTS       | 2                               |
| ORDERFLOW_CORS_ORIGINS         | http://localhost:3000           |
| ORDERFLOW_HOST / _PORT         | 0.0.0.0 / 3000                  |
| ORDERFLOW_EVENT_QUEUE_SIZE     | 1000                            |
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


def _default_database_url() -> str:
    return f"sqlite:///{_DATA_DIR / 'orderflow.db'}"


@dataclass(frozen=True)
class Settings:

    database_url: str = field(default_factory=_default_database_url)
    log_level: str = "INFO"
    strict_transitions: bool = False
    order_attempts: int = 2
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)
    host: str = "0.0.0.0"
    port: int = 3000
    event_queue_size: int = 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        origins = env.get("ORDERFLOW_CORS_ORIGINS", "http://localhost:3000")
        return cls(
            database_url=env.get("ORDERFLOW_DATABASE_URL") or _default_database_url(),
            log_level=env.get("ORDERFLOW_LOG_LEVEL", "INFO").upper(),
            strict_transitions=env.get("ORDERFLOW_STRICT_TRANSITIONS", "false").lower() in _TRUTHY,
            order_attempts=int(env.get("ORDERFLOW_ORDER_ATTEMPTS", "2")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            host=env.get("ORDERFLOW_HOST", "0.0.0.0"),
            port=int(env.get("ORDERFLOW_PORT", "3000")),
            event_queue_size=int(env.get("ORDERFLOW_EVENT_QUEUE_SIZE", "1000")),
        )
