# ============================================================================
# File: api/middleware.py
# Description: Request id propagation and access logging
# ============================================================================

import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

access_logger = logging.getLogger("api.access")

REQUEST_ID_HEADER = "X-Request-ID"
LATENCY_HEADER = "X-API-Latency-ms"


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id and writes one access log line for it.

    A caller-supplied X-Request-ID is reused so a fetch can be traced across
    services; otherwise a fresh uuid4 is generated. Route handlers read the
    id from ``request.state.request_id``.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        try:
            response: Response = await call_next(request)
        except Exception:
            access_logger.exception(
                f"[{request_id}] {request.method} {target} crashed after {_elapsed_ms(started)}ms"
            )
            raise

        latency_ms = _elapsed_ms(started)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[LATENCY_HEADER] = str(latency_ms)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        access_logger.log(
            level,
            f"[{request_id}] {request.method} {target} -> {response.status_code} ({latency_ms}ms)"
        )

        return response
