"""
Pet Registry API Module.

REST adapter that supplies caller identities to the registry.
"""

from pet_registry.api.app import create_app

__all__ = ["create_app"]
