"""
Registry Storage - one pet record per identity, guarded by an administrator.

Holds the identity -> record mapping in memory behind a single lock, with an
optional JSON snapshot for host persistence and an optional JSONL audit trail.
"""

import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pet_registry.core.exceptions import ConfigurationError
from pet_registry.core.models import (
    MAX_PET_AGE,
    ErrorKind,
    PetRecord,
    RegistryOperation,
    RegistryResult,
)

logger = logging.getLogger(__name__)

MSG_DUPLICATE = "User already has a registered pet"
MSG_NOT_FOUND = "User has no registered pet"
MSG_UNAUTHORIZED = "Only owner can call this function"


class RegistrySnapshot(BaseModel):
    """Persisted form of the registry."""

    version: str = "1.0"
    administrator: str
    updated_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    records: dict[str, PetRecord] = Field(
        default_factory=dict, description="identity -> pet record"
    )


def load_snapshot(path: Path) -> RegistrySnapshot | None:
    """
    Load a registry snapshot from disk.

    Returns:
        The snapshot, or None if the file does not exist

    Raises:
        ConfigurationError: If the file cannot be parsed
    """
    if not path.exists():
        return None
    try:
        # bytes, so invalid UTF-8 surfaces as a validation error
        return RegistrySnapshot.model_validate_json(path.read_bytes())
    except (OSError, PydanticValidationError) as e:
        raise ConfigurationError(
            f"Registry snapshot is unreadable: {e}",
            config_file=str(path),
        ) from e


def validate_pet(name: object, age: object, vaccinated: object) -> str | None:
    """
    Check pet data against the record rules.

    Returns:
        A rejection message, or None if the data is valid
    """
    if not isinstance(name, str):
        return "Pet name must be a string"
    if not name:
        return "Pet name cannot be empty"
    # bool is an int subclass
    if isinstance(age, bool) or not isinstance(age, int):
        return "Pet age must be an integer"
    if age < 0:
        return "Pet age cannot be negative"
    if age > MAX_PET_AGE:
        return f"Pet age cannot exceed {MAX_PET_AGE} years"
    if not isinstance(vaccinated, bool):
        return "Vaccination status must be a boolean"
    return None


class PetRegistry:
    """
    Per-identity pet registry.

    Each identity may hold at most one PetRecord. Records are created by
    register, changed only through update_vaccination and removed only by
    the administrator via delete_pet. Every operation runs under one lock,
    so concurrent calls are applied in a single total order.

    Operations never raise for rejected calls; they return a RegistryResult
    tagged with an ErrorKind. Use RegistryResult.raise_for_error() to turn a
    failure into an exception.
    """

    AUDIT_FILE = "registry_log.jsonl"

    def __init__(
        self,
        administrator: str,
        *,
        state_file: Path | None = None,
        audit_dir: Path | None = None,
    ):
        """
        Initialize the registry.

        Args:
            administrator: Identity allowed to delete records, fixed for the
                registry's lifetime
            state_file: Optional JSON snapshot to load from and persist to
            audit_dir: Optional directory for the mutation audit log

        Raises:
            ConfigurationError: If the administrator is empty or does not
                match the one recorded in an existing snapshot
        """
        if not isinstance(administrator, str) or not administrator:
            raise ConfigurationError(
                "Administrator identity must be a non-empty string",
                config_key="administrator",
            )

        self._administrator = administrator
        self._state_file = Path(state_file) if state_file else None
        self._audit_dir = Path(audit_dir) if audit_dir else None
        if self._audit_dir:
            self._audit_dir.mkdir(parents=True, exist_ok=True)

        self._lock = threading.RLock()
        self._records: dict[str, PetRecord] = {}

        if self._state_file:
            self._load_state()

    @property
    def administrator(self) -> str:
        """Identity allowed to delete any record."""
        return self._administrator

    def _load_state(self) -> None:
        """Restore records from the snapshot file, if one exists."""
        snapshot = load_snapshot(self._state_file)
        if snapshot is None:
            logger.debug(f"No registry snapshot at {self._state_file}, starting empty")
            return

        if snapshot.administrator != self._administrator:
            raise ConfigurationError(
                "Administrator does not match the persisted registry",
                config_file=str(self._state_file),
                config_key="administrator",
            )

        self._records = dict(snapshot.records)
        logger.debug(f"Loaded {len(self._records)} records from {self._state_file}")

    def _save_state(self, records: dict[str, PetRecord]) -> None:
        """Persist records atomically using write-replace pattern."""
        if not self._state_file:
            return

        snapshot = RegistrySnapshot(administrator=self._administrator, records=records)
        self._state_file.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._state_file.with_name(f"{self._state_file.name}.tmp")

        try:
            temp_path.write_text(snapshot.model_dump_json(indent=2))
            os.replace(temp_path, self._state_file)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug(f"Saved registry snapshot to {self._state_file}")

    def _commit(self, records: dict[str, PetRecord]) -> None:
        """Persist a new mapping, then make it current."""
        self._save_state(records)
        self._records = records

    def _rollback(self, previous: dict[str, PetRecord]) -> None:
        """Restore the mapping that was current before a failed mutation."""
        self._records = previous
        self._save_state(previous)
        logger.warning("Mutation rolled back after audit log write failed")

    def _write_audit_log(self, result: RegistryResult) -> str:
        """Write audit log entry and return reference."""
        if not self._audit_dir:
            return ""

        audit_ref = str(uuid.uuid4())[:8]
        entry = {
            "audit_ref": audit_ref,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "operation": result.operation.value,
            "caller": result.caller,
            "target": result.target,
            "status": result.status,
            "error": result.error.value if result.error else None,
        }

        with open(self._audit_dir / self.AUDIT_FILE, "a") as f:
            f.write(json.dumps(entry) + "\n")

        return audit_ref

    def _reject(
        self,
        operation: RegistryOperation,
        caller: str,
        error: ErrorKind,
        message: str,
        target: str | None = None,
    ) -> RegistryResult:
        result = RegistryResult(
            status="failure",
            operation=operation,
            caller=caller,
            target=target,
            error=error,
            message=message,
        )
        if operation is not RegistryOperation.GET:
            result.audit_ref = self._write_audit_log(result)
        logger.warning(f"{operation.value} rejected for {caller}: {error.value} ({message})")
        return result

    def _accept(
        self,
        operation: RegistryOperation,
        caller: str,
        record: PetRecord | None,
        target: str | None = None,
        records: dict[str, PetRecord] | None = None,
    ) -> RegistryResult:
        """
        Build a success result, applying records as the new mapping if given.

        The new mapping is committed and audited as one step: if the audit
        entry cannot be written the previous mapping is restored and the
        error propagates.
        """
        result = RegistryResult(
            status="success",
            operation=operation,
            caller=caller,
            target=target,
            record=record,
        )
        if records is not None:
            previous = self._records
            self._commit(records)
            try:
                result.audit_ref = self._write_audit_log(result)
            except Exception:
                self._rollback(previous)
                raise
            logger.info(f"{operation.value} by {caller} succeeded (target={target or caller})")
        return result

    def register(
        self, caller: str, name: str, age: int, vaccinated: bool
    ) -> RegistryResult:
        """
        Register the caller's pet.

        Fails with DUPLICATE_RECORD if the caller already has a pet and with
        INVALID_INPUT if the name is empty or the age is outside [0, 30].
        """
        operation = RegistryOperation.REGISTER
        with self._lock:
            if caller in self._records:
                return self._reject(operation, caller, ErrorKind.DUPLICATE_RECORD, MSG_DUPLICATE)

            problem = validate_pet(name, age, vaccinated)
            if problem:
                return self._reject(operation, caller, ErrorKind.INVALID_INPUT, problem)

            record = PetRecord(name=name, age=age, vaccinated=vaccinated)
            return self._accept(
                operation, caller, record, records={**self._records, caller: record}
            )

    def get(self, caller: str) -> RegistryResult:
        """Return the caller's pet; result.record.as_tuple() gives (name, age, vaccinated)."""
        operation = RegistryOperation.GET
        with self._lock:
            record = self._records.get(caller)
            if record is None:
                return self._reject(operation, caller, ErrorKind.NOT_FOUND, MSG_NOT_FOUND)
            return self._accept(operation, caller, record)

    def update_vaccination(self, caller: str, vaccinated: bool) -> RegistryResult:
        """Set the vaccination flag of the caller's pet. Name and age are left untouched."""
        operation = RegistryOperation.UPDATE_VACCINATION
        with self._lock:
            record = self._records.get(caller)
            if record is None:
                return self._reject(operation, caller, ErrorKind.NOT_FOUND, MSG_NOT_FOUND)
            if not isinstance(vaccinated, bool):
                return self._reject(
                    operation,
                    caller,
                    ErrorKind.INVALID_INPUT,
                    "Vaccination status must be a boolean",
                )

            updated = record.model_copy(update={"vaccinated": vaccinated})
            return self._accept(
                operation, caller, updated, records={**self._records, caller: updated}
            )

    def delete_pet(self, requester: str, target: str) -> RegistryResult:
        """
        Remove target's pet. Administrator only.

        Authorization is checked before existence so an unauthorized caller
        cannot learn whether target has a record.
        """
        operation = RegistryOperation.DELETE
        with self._lock:
            if requester != self._administrator:
                return self._reject(
                    operation, requester, ErrorKind.UNAUTHORIZED, MSG_UNAUTHORIZED, target=target
                )
            if target not in self._records:
                return self._reject(
                    operation, requester, ErrorKind.NOT_FOUND, MSG_NOT_FOUND, target=target
                )

            records = dict(self._records)
            removed = records.pop(target)
            return self._accept(operation, requester, removed, target=target, records=records)

    def is_registered(self, identity: str) -> bool:
        """Return True if identity currently has a registered pet."""
        with self._lock:
            return identity in self._records
