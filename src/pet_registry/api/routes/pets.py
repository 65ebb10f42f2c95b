"""
Pet endpoints.

Each handler threads the caller identity from request state into one
registry operation and maps a rejected result onto an API error.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from pet_registry.api.middleware.caller import require_caller
from pet_registry.api.schemas.exceptions import raise_for_result
from pet_registry.api.schemas.requests import PetRegisterRequest, VaccinationUpdateRequest
from pet_registry.api.schemas.responses import (
    PetOperationResponse,
    PetResponse,
    RegistrationStatusResponse,
)
from pet_registry.registry.storage import PetRegistry

router = APIRouter()
logger = logging.getLogger(__name__)


def get_registry(request: Request) -> PetRegistry:
    """Return the registry bound to the running application."""
    return request.app.state.registry


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
async def register_pet(
    body: PetRegisterRequest,
    caller: str = Depends(require_caller),
    registry: PetRegistry = Depends(get_registry),
) -> PetResponse:
    """
    Register the caller's pet.

    Returns:
        The stored record

    Raises:
        ConflictError: Caller already has a pet (409)
        InvalidInputAPIError: Empty name or age outside 0-30 (400)
    """
    result = registry.register(caller, body.name, body.age, body.vaccinated)
    raise_for_result(result)
    return PetResponse.from_record(caller, result.record)


@router.get("/me", response_model=PetResponse)
async def get_pet(
    caller: str = Depends(require_caller),
    registry: PetRegistry = Depends(get_registry),
) -> PetResponse:
    """Return the caller's pet (404 if none)."""
    result = registry.get(caller)
    raise_for_result(result)
    return PetResponse.from_record(caller, result.record)


@router.patch("/me/vaccination", response_model=PetResponse)
async def update_vaccination(
    body: VaccinationUpdateRequest,
    caller: str = Depends(require_caller),
    registry: PetRegistry = Depends(get_registry),
) -> PetResponse:
    """Set the vaccination flag of the caller's pet (404 if none)."""
    result = registry.update_vaccination(caller, body.vaccinated)
    raise_for_result(result)
    return PetResponse.from_record(caller, result.record)


@router.delete("/{target:path}", response_model=PetOperationResponse)
async def delete_pet(
    target: str,
    caller: str = Depends(require_caller),
    registry: PetRegistry = Depends(get_registry),
) -> PetOperationResponse:
    """
    Delete another identity's pet. Administrator only.

    Raises:
        ForbiddenError: Caller is not the administrator (403), checked first
        NotFoundError: Target has no pet (404)
    """
    result = registry.delete_pet(caller, target)
    raise_for_result(result)
    return PetOperationResponse(
        status=result.status,
        operation=result.operation.value,
        target=target,
        audit_ref=result.audit_ref,
    )


@router.get("/{identity:path}/registered", response_model=RegistrationStatusResponse)
async def is_registered(
    identity: str,
    registry: PetRegistry = Depends(get_registry),
) -> RegistrationStatusResponse:
    """Check whether an identity has a registered pet."""
    return RegistrationStatusResponse(
        identity=identity,
        registered=registry.is_registered(identity),
    )
