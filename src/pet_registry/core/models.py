"""
Core data models for the Pet Registry.

Records, operation names and the tagged result every registry call returns.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from pet_registry.core.exceptions import (
    DuplicateRecordError,
    InvalidInputError,
    RecordNotFoundError,
    RegistryError,
    UnauthorizedError,
)

MAX_PET_AGE = 30


class RegistryOperation(Enum):
    """Operations exposed by the registry."""

    REGISTER = "register"
    GET = "get"
    UPDATE_VACCINATION = "update_vaccination"
    DELETE = "delete"


class ErrorKind(Enum):
    """Reasons a registry operation can be rejected."""

    INVALID_INPUT = "invalid_input"
    DUPLICATE_RECORD = "duplicate_record"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"


class PetRecord(BaseModel):
    """The single pet registered to an identity."""

    name: str = Field(min_length=1, description="Pet name, never empty")
    age: int = Field(ge=0, le=MAX_PET_AGE, description="Age in years")
    vaccinated: bool = False

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    def as_tuple(self) -> tuple[str, int, bool]:
        """Return (name, age, vaccinated)."""
        return self.name, self.age, self.vaccinated


@dataclass
class RegistryResult:
    """Result of a registry operation."""

    status: str  # "success" or "failure"
    operation: RegistryOperation
    caller: str
    target: str | None = None
    record: PetRecord | None = None
    error: ErrorKind | None = None
    message: str = ""
    audit_ref: str = ""

    @property
    def ok(self) -> bool:
        """Return True if the operation succeeded."""
        return self.status == "success"

    def raise_for_error(self) -> "RegistryResult":
        """
        Raise the matching RegistryError if the operation failed.

        Returns:
            self, so successful results can be chained

        Raises:
            InvalidInputError, DuplicateRecordError, RecordNotFoundError,
            UnauthorizedError
        """
        if self.ok:
            return self
        raise self.to_exception()

    def to_exception(self) -> RegistryError:
        """Build the exception describing this failure."""
        operation = self.operation.value
        match self.error:
            case ErrorKind.INVALID_INPUT:
                return InvalidInputError(
                    self.message, identity=self.caller, operation=operation
                )
            case ErrorKind.DUPLICATE_RECORD:
                return DuplicateRecordError(self.message, identity=self.caller)
            case ErrorKind.NOT_FOUND:
                return RecordNotFoundError(
                    self.message,
                    identity=self.target or self.caller,
                    operation=operation,
                )
            case ErrorKind.UNAUTHORIZED:
                return UnauthorizedError(
                    self.message, requester=self.caller, operation=operation
                )
            case _:
                return RegistryError(
                    self.message or "Registry operation failed",
                    identity=self.caller,
                    operation=operation,
                )

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "status": self.status,
            "operation": self.operation.value,
            "caller": self.caller,
            "target": self.target,
            "record": self.record.model_dump() if self.record else None,
            "error": self.error.value if self.error else None,
            "message": self.message,
            "audit_ref": self.audit_ref,
        }
