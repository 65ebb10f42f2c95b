"""
Pydantic schemas for API request/response validation.

This module exports all request and response schemas used by the API.
"""

from pet_registry.api.schemas.exceptions import (
    APIException,
    CallerRequiredError,
    ConflictError,
    ForbiddenError,
    InvalidInputAPIError,
    NotFoundError,
    raise_for_result,
)
from pet_registry.api.schemas.requests import (
    PetRegisterRequest,
    VaccinationUpdateRequest,
)
from pet_registry.api.schemas.responses import (
    AdministratorResponse,
    HealthResponse,
    PetOperationResponse,
    PetResponse,
    RegistrationStatusResponse,
)

__all__ = [
    # Exceptions
    "APIException",
    "CallerRequiredError",
    "ConflictError",
    "ForbiddenError",
    "InvalidInputAPIError",
    "NotFoundError",
    "raise_for_result",
    # Requests
    "PetRegisterRequest",
    "VaccinationUpdateRequest",
    # Responses
    "AdministratorResponse",
    "HealthResponse",
    "PetOperationResponse",
    "PetResponse",
    "RegistrationStatusResponse",
]
