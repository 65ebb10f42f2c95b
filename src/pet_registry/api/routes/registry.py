"""
Registry endpoints.

Read-only information about the registry itself.
"""

from fastapi import APIRouter, Depends

from pet_registry.api.routes.pets import get_registry
from pet_registry.api.schemas.responses import AdministratorResponse
from pet_registry.registry.storage import PetRegistry

router = APIRouter()


@router.get("/administrator", response_model=AdministratorResponse)
async def get_administrator(
    registry: PetRegistry = Depends(get_registry),
) -> AdministratorResponse:
    """Return the identity allowed to delete records."""
    return AdministratorResponse(administrator=registry.administrator)
