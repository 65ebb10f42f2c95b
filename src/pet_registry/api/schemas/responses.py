"""
Pydantic response schemas for API endpoints.

All API responses conform to these schemas for consistent output.
"""

from pydantic import BaseModel, Field

from pet_registry.core.models import PetRecord


class PetResponse(BaseModel):
    """Response model for a pet record."""

    owner: str = Field(..., description="Identity owning the pet")
    name: str = Field(..., description="Pet name")
    age: int = Field(..., description="Pet age in years")
    vaccinated: bool = Field(..., description="Vaccination status")

    model_config = {"extra": "forbid"}

    @classmethod
    def from_record(cls, owner: str, record: PetRecord) -> "PetResponse":
        """Build a response from a stored record."""
        return cls(owner=owner, **record.model_dump())


class PetOperationResponse(BaseModel):
    """Response model for registry mutations without a record payload."""

    status: str = Field(..., description="Operation status")
    operation: str = Field(..., description="Operation performed")
    target: str = Field(..., description="Identity whose record was affected")
    audit_ref: str = Field("", description="Audit log reference, empty when auditing is off")

    model_config = {"extra": "forbid"}


class RegistrationStatusResponse(BaseModel):
    """Response model for an existence check."""

    identity: str = Field(..., description="Identity checked")
    registered: bool = Field(..., description="Whether the identity has a pet")

    model_config = {"extra": "forbid"}


class AdministratorResponse(BaseModel):
    """Response model for the administrator identity."""

    administrator: str = Field(..., description="Identity allowed to delete records")

    model_config = {"extra": "forbid"}


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Check timestamp")
    components: dict[str, str] = Field(default_factory=dict, description="Component statuses")

    model_config = {"extra": "forbid"}

