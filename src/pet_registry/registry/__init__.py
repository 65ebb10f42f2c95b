"""
Pet Registry Storage Module.

Provides the per-identity pet registry and its persisted snapshot.
"""

__all__ = [
    "PetRegistry",
    "RegistrySnapshot",
    "load_snapshot",
    "validate_pet",
]

from pet_registry.registry.storage import (
    PetRegistry,
    RegistrySnapshot,
    load_snapshot,
    validate_pet,
)
