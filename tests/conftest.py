"""Shared pytest fixtures for chefpublish tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from chefpublish.config import PublishConfig
from chefpublish.shell import CommandResult


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create an empty workspace directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Directory standing in for $HOME where generated configs land."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def make_config(workspace: Path, home: Path):
    """Factory for PublishConfig objects pointing into tmp directories."""

    def _make(**overrides) -> PublishConfig:
        values = {
            "org": "acme",
            "server": "https://chef.example.com",
            "user": "deployer",
            "keyfile_path": home / ".chef" / "client.pem",
            "ssl_verify": True,
            "workspace": workspace,
            "recursive": True,
            "freeze": True,
            "knife_config_path": home / ".chef" / "knife.rb",
            "berks_config_path": home / ".berkshelf" / "config.json",
        }
        values.update(overrides)
        return PublishConfig(**values)

    return _make


@pytest.fixture
def mock_run(mocker) -> MagicMock:
    """Patch run_command in the processor; every command succeeds."""

    def _ok(argv, *, cwd=None):
        return CommandResult(argv=argv, returncode=0, stdout="", stderr="")

    return mocker.patch("chefpublish.processor.run_command", side_effect=_ok)


@pytest.fixture
def make_files(workspace: Path):
    """Factory creating files (and parent dirs) inside the workspace.

    metadata.rb gets a minimal cookbook declaration, other files are empty.
    """

    def _make(*names: str) -> None:
        for name in names:
            path = workspace / name
            path.parent.mkdir(parents=True, exist_ok=True)
            if name.endswith("metadata.rb"):
                path.write_text("name 'mycookbook'\nversion '1.2.3'\n")
            else:
                path.write_text("")

    return _make
