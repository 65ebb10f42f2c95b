"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from pet_registry.registry.storage import PetRegistry

ADMIN = "owner"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry() -> PetRegistry:
    """Provide an in-memory registry administered by ADMIN."""
    return PetRegistry(ADMIN)


@pytest.fixture
def persistent_registry(temp_dir: Path) -> PetRegistry:
    """Provide a registry that snapshots to disk and writes an audit log."""
    return PetRegistry(
        ADMIN,
        state_file=temp_dir / "state" / "registry.json",
        audit_dir=temp_dir / "audit",
    )
