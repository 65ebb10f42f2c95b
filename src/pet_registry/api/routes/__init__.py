"""
API route handlers.

This package contains all route definitions for the Pet Registry API.
"""

from pet_registry.api.routes import health, pets, registry

__all__ = [
    "health",
    "pets",
    "registry",
]
