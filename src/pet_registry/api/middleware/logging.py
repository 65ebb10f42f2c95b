"""
Request logging middleware.

One log line per registry request, naming the caller and the outcome.
Rejected requests log at WARNING so refused mutations stand out.
"""

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Polled by orchestrators; still timed, never logged
QUIET_PATHS = frozenset({"/health"})


def _caller(request: Request) -> str:
    return getattr(request.state, "caller", None) or "anonymous"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its caller and stamp timing headers on the response."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        line = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"{line} by {_caller(request)} failed [{request_id}]")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        if request.url.path not in QUIET_PATHS:
            level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                level,
                f"{line} by {_caller(request)} -> {response.status_code} "
                f"({elapsed_ms:.2f}ms) [{request_id}]",
            )

        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}"
        response.headers["X-Request-ID"] = request_id
        return response
