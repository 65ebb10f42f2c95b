"""
Caller identity middleware.

The registry never authenticates anyone; it trusts the identity handed to
it. This middleware is the seam where the transport supplies that identity:
it copies the configured header into request.state.caller.
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from pet_registry.api.schemas.exceptions import CallerRequiredError

logger = logging.getLogger(__name__)


class CallerIdentityMiddleware(BaseHTTPMiddleware):
    """Extract the caller identity header into request state."""

    def __init__(self, app: ASGIApp, *, caller_header: str = "x-caller-id") -> None:
        super().__init__(app)
        self._caller_header = caller_header.lower()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        caller = request.headers.get(self._caller_header, "").strip()
        request.state.caller = caller or None

        if caller:
            logger.debug(f"Request from caller {caller} on {request.url.path}")

        return await call_next(request)


async def get_optional_caller(request: Request) -> str | None:
    """
    Get caller identity from request state if present.

    Args:
        request: Current request

    Returns:
        Caller identity or None
    """
    return getattr(request.state, "caller", None)


async def require_caller(request: Request) -> str:
    """
    Get caller identity from request state, raising error if missing.

    Use this in route handlers that act on behalf of a caller.

    Raises:
        CallerRequiredError: If no caller identity in request state
    """
    caller = await get_optional_caller(request)
    if not caller:
        raise CallerRequiredError(
            detail=f"Provide the caller identity in the {request.app.state.settings.caller_header} header",
        )
    return caller
