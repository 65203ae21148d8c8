"""Translate domain exceptions into HTTP responses.

Every error body carries an ``error`` message; some add remediation
data (``availableStock``, ``validStatuses``, ``allowedStatuses``).
Unexpected exceptions become a bare 500 and are logged with traceback.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from orderflow.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    IllegalTransitionError,
    InsufficientStockError,
    InvalidStatusError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


async def handle_domain_error(request: Request, exc: DomainException) -> JSONResponse:
    if isinstance(exc, InsufficientStockError):
        return _error(400, "Insufficient stock", availableStock=exc.available_stock)
    if isinstance(exc, InvalidStatusError):
        return _error(400, "Invalid status", validStatuses=exc.valid_statuses)
    if isinstance(exc, ValidationError):
        return _error(400, str(exc))
    if isinstance(exc, EntityNotFoundError):
        return _error(404, str(exc))
    if isinstance(exc, IllegalTransitionError):
        return _error(
            409, str(exc), currentStatus=exc.current, allowedStatuses=exc.allowed
        )
    if isinstance(exc, ConflictError):
        return _error(409, str(exc))
    return await handle_unexpected_error(request, exc)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("request rejected", extra={"path": request.url.path, "errors": str(exc.errors())})
    return _error(400, "Invalid request")


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return _error(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
