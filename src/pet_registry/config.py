"""
Runtime configuration.

Settings are read from PET_REGISTRY_* environment variables. The
administrator identity is the only required value; everything else has a
default suitable for local development.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from pet_registry.core.exceptions import ConfigurationError
from pet_registry.registry.storage import PetRegistry

ENV_ADMIN = "PET_REGISTRY_ADMIN"
ENV_STATE_FILE = "PET_REGISTRY_STATE_FILE"
ENV_AUDIT_DIR = "PET_REGISTRY_AUDIT_DIR"
ENV_LOG_LEVEL = "PET_REGISTRY_LOG_LEVEL"
ENV_CALLER_HEADER = "PET_REGISTRY_CALLER_HEADER"


class RegistrySettings(BaseModel):
    """Settings for building a registry and serving it."""

    administrator: str = Field(min_length=1, description="Identity allowed to delete records")
    state_file: Path | None = Field(default=None, description="JSON snapshot location")
    audit_dir: Path | None = Field(default=None, description="Audit log directory")
    log_level: str = "INFO"
    caller_header: str = "x-caller-id"

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If PET_REGISTRY_ADMIN is not set
        """
        administrator = os.getenv(ENV_ADMIN, "").strip()
        if not administrator:
            raise ConfigurationError(
                "Administrator identity is not configured",
                env_var=ENV_ADMIN,
            )

        state_file = os.getenv(ENV_STATE_FILE)
        audit_dir = os.getenv(ENV_AUDIT_DIR)

        return cls(
            administrator=administrator,
            state_file=Path(state_file) if state_file else None,
            audit_dir=Path(audit_dir) if audit_dir else None,
            log_level=os.getenv(ENV_LOG_LEVEL, "INFO").upper(),
            caller_header=os.getenv(ENV_CALLER_HEADER, "x-caller-id").lower(),
        )

    def build_registry(self) -> PetRegistry:
        """Create a registry from these settings."""
        return PetRegistry(
            self.administrator,
            state_file=self.state_file,
            audit_dir=self.audit_dir,
        )
