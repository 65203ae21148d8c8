"""Middleware that assigns and propagates a request identifier.

The id is read from the incoming ``X-Request-ID`` header when the
client provides one, or generated (UUIDv4) otherwise.  It is stored in
``REQUEST_ID_CTX`` so log records emitted while handling the request
carry it, and echoed back in the ``X-Request-ID`` response header.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request

from orderflow.infrastructure.logging_setup import REQUEST_ID_CTX

logger = logging.getLogger(__name__)

RESPONSE_HEADER = "X-Request-ID"


async def add_request_id(request: Request, call_next):
    rid = request.headers.get(RESPONSE_HEADER) or str(uuid.uuid4())
    request.state.request_id = rid
    token = REQUEST_ID_CTX.set(rid)
    started = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers[RESPONSE_HEADER] = rid
        logger.info(
            "request handled",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
    finally:
        REQUEST_ID_CTX.reset(token)
