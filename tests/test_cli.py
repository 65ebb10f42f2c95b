"""Tests for CLI module."""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pet_registry.cli import app
from pet_registry.registry.storage import PetRegistry

runner = CliRunner()


@pytest.fixture
def state_file(temp_dir: Path) -> Path:
    """A snapshot holding one pet for alice."""
    path = temp_dir / "registry.json"
    registry = PetRegistry("owner", state_file=path)
    registry.register("alice", "Buddy", 3, True)
    return path


class TestShowCommand:
    """Tests for the show command."""

    def test_show_registered(self, state_file: Path) -> None:
        result = runner.invoke(app, ["show", "alice", "--state-file", str(state_file)])

        assert result.exit_code == 0
        assert "Buddy" in result.stdout
        assert "yes" in result.stdout

    def test_show_unregistered(self, state_file: Path) -> None:
        result = runner.invoke(app, ["show", "bob", "--state-file", str(state_file)])

        assert result.exit_code == 1
        assert "no registered pet" in result.stdout

    def test_show_missing_snapshot(self, temp_dir: Path) -> None:
        result = runner.invoke(app, ["show", "alice", "-s", str(temp_dir / "missing.json")])

        assert result.exit_code == 1
        assert "does not exist" in result.stdout

    def test_show_corrupt_snapshot(self, temp_dir: Path) -> None:
        path = temp_dir / "registry.json"
        path.write_text("{not json")

        result = runner.invoke(app, ["show", "alice", "-s", str(path)])

        assert result.exit_code == 1
        assert "unreadable" in result.stdout

    def test_show_undecodable_snapshot(self, temp_dir: Path) -> None:
        path = temp_dir / "registry.json"
        path.write_bytes(b"\xff\xfe\x00{")

        result = runner.invoke(app, ["show", "alice", "-s", str(path)])

        assert result.exit_code == 1
        assert "unreadable" in result.stdout


class TestAdminCommand:
    """Tests for the admin command."""

    def test_admin(self, state_file: Path) -> None:
        result = runner.invoke(app, ["admin", "--state-file", str(state_file)])

        assert result.exit_code == 0
        assert "Administrator: owner" in result.stdout


class TestServeCommand:
    """Tests for the serve command."""

    def test_serve_requires_admin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PET_REGISTRY_ADMIN", raising=False)

        result = runner.invoke(app, ["serve"])

        assert result.exit_code == 1
        assert "PET_REGISTRY_ADMIN" in result.stdout

    def test_serve_runs_uvicorn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PET_REGISTRY_ADMIN", "owner")
        monkeypatch.delenv("PET_REGISTRY_STATE_FILE", raising=False)
        monkeypatch.delenv("PET_REGISTRY_AUDIT_DIR", raising=False)

        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9001"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["port"] == 9001
        assert mock_run.call_args.args[0].state.registry.administrator == "owner"


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Pet Registry v" in result.stdout
