"""
Middleware for the Pet Registry API.
"""

from pet_registry.api.middleware.caller import (
    CallerIdentityMiddleware,
    get_optional_caller,
    require_caller,
)
from pet_registry.api.middleware.logging import RequestLoggingMiddleware

__all__ = [
    "CallerIdentityMiddleware",
    "RequestLoggingMiddleware",
    "get_optional_caller",
    "require_caller",
]
