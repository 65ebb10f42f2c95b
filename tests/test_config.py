"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from pet_registry.config import RegistrySettings
from pet_registry.core.exceptions import ConfigurationError
from pet_registry.registry.storage import PetRegistry


class TestRegistrySettings:
    """Tests for RegistrySettings.from_env."""

    def test_missing_admin_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """PET_REGISTRY_ADMIN is required."""
        monkeypatch.delenv("PET_REGISTRY_ADMIN", raising=False)

        with pytest.raises(ConfigurationError) as exc_info:
            RegistrySettings.from_env()
        assert exc_info.value.env_var == "PET_REGISTRY_ADMIN"

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PET_REGISTRY_ADMIN", "owner")
        for var in (
            "PET_REGISTRY_STATE_FILE",
            "PET_REGISTRY_AUDIT_DIR",
            "PET_REGISTRY_LOG_LEVEL",
            "PET_REGISTRY_CALLER_HEADER",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = RegistrySettings.from_env()

        assert settings.administrator == "owner"
        assert settings.state_file is None
        assert settings.audit_dir is None
        assert settings.log_level == "INFO"
        assert settings.caller_header == "x-caller-id"

    def test_all_variables(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
        monkeypatch.setenv("PET_REGISTRY_ADMIN", "owner")
        monkeypatch.setenv("PET_REGISTRY_STATE_FILE", str(temp_dir / "registry.json"))
        monkeypatch.setenv("PET_REGISTRY_AUDIT_DIR", str(temp_dir / "audit"))
        monkeypatch.setenv("PET_REGISTRY_LOG_LEVEL", "debug")
        monkeypatch.setenv("PET_REGISTRY_CALLER_HEADER", "X-Account")

        settings = RegistrySettings.from_env()

        assert settings.state_file == temp_dir / "registry.json"
        assert settings.audit_dir == temp_dir / "audit"
        assert settings.log_level == "DEBUG"
        assert settings.caller_header == "x-account"

    def test_build_registry(self, temp_dir: Path) -> None:
        """Settings build a registry with the configured administrator and storage."""
        settings = RegistrySettings(
            administrator="owner",
            state_file=temp_dir / "registry.json",
            audit_dir=temp_dir / "audit",
        )

        registry = settings.build_registry()
        registry.register("alice", "Buddy", 3, True)

        assert isinstance(registry, PetRegistry)
        assert registry.administrator == "owner"
        assert (temp_dir / "registry.json").exists()
        assert (temp_dir / "audit" / PetRegistry.AUDIT_FILE).exists()
