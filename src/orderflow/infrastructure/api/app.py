"""FastAPI application factory.

``create_app()`` wires the container, CORS, request-id middleware,
error translation and the routers.  The event dispatcher thread lives
for the lifetime of the application.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orderflow.infrastructure.api.errors import register_error_handlers
from orderflow.infrastructure.api.middleware import add_request_id
from orderflow.infrastructure.api.routes import events, orders, products, users
from orderflow.infrastructure.bootstrap import Container, build_container
from orderflow.infrastructure.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_container()
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container.dispatcher.start()
        logger.info(
            "service started",
            extra={"database": container.engine.url.render_as_string(hide_password=True)},
        )
        yield
        container.dispatcher.stop()
        logger.info("service stopped")

    app = FastAPI(title="Order Fulfillment Service", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(add_request_id)
    register_error_handlers(app)

    app.include_router(orders.router)
    app.include_router(products.router)
    app.include_router(users.router)
    app.include_router(events.router)

    @app.get("/")
    def root() -> dict:
        return {"message": "Order fulfillment API is running"}

    @app.get("/health")
    def health() -> dict:
        return {"ok": True}

    return app
