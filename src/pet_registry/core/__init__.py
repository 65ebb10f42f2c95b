"""
Pet Registry Core Module.

Provides foundational types and exceptions for the registry.
"""

__all__ = [
    "MAX_PET_AGE",
    "ErrorKind",
    "PetRecord",
    "RegistryOperation",
    "RegistryResult",
    # Exceptions
    "PetRegistryError",
    "RegistryError",
    "InvalidInputError",
    "DuplicateRecordError",
    "RecordNotFoundError",
    "UnauthorizedError",
    "ConfigurationError",
]

from pet_registry.core.exceptions import (
    ConfigurationError,
    DuplicateRecordError,
    InvalidInputError,
    PetRegistryError,
    RecordNotFoundError,
    RegistryError,
    UnauthorizedError,
)
from pet_registry.core.models import (
    MAX_PET_AGE,
    ErrorKind,
    PetRecord,
    RegistryOperation,
    RegistryResult,
)
