"""
Pydantic request schemas for API endpoints.

Only value types are checked here, and strictly: "7" is not an age and
1 is not a vaccination flag. Range and emptiness rules belong to the
registry, so every rule violation reports the same error shape.
"""

from pydantic import BaseModel, Field


class PetRegisterRequest(BaseModel):
    """Request to register the caller's pet."""

    name: str = Field(
        ...,
        description="Pet name (non-empty)",
        examples=["Buddy"],
    )
    age: int = Field(
        ...,
        description="Pet age in years, 0 to 30",
        examples=[3],
    )
    vaccinated: bool = Field(
        ...,
        description="Whether the pet is vaccinated",
        examples=[True],
    )

    model_config = {"extra": "forbid", "strict": True}


class VaccinationUpdateRequest(BaseModel):
    """Request to change the vaccination flag of the caller's pet."""

    vaccinated: bool = Field(
        ...,
        description="New vaccination status",
        examples=[True],
    )

    model_config = {"extra": "forbid", "strict": True}
