"""Shared pytest fixtures and test helpers for git-drive tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from git_drive.domain.models import Config, Driver, Navigator
from git_drive.infrastructure.store import ConfigStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at an isolated config directory via the env var."""
    directory = tmp_path / "config"
    monkeypatch.setenv("GIT_DRIVE_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    """ConfigStore on a fresh (not yet created) directory."""
    return ConfigStore(tmp_path / "config")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def nav(alias: str, name: str | None = None, email: str | None = None) -> Navigator:
    """Build a navigator with predictable defaults derived from *alias*."""
    return Navigator(
        alias=alias,
        name=name or f"Navigator {alias}",
        email=email or f"{alias}@example.org",
    )


def drv(alias: str, key: str | None = None) -> Driver:
    return Driver(navigator=nav(alias), key=key)


def sample_config() -> Config:
    return Config(
        navigators=[nav("nav1", "Navigator One", "nav1@example.org"), nav("nav2")],
        drivers=[drv("drv1", key="~/.ssh/id_ed25519.pub"), drv("drv2")],
    )
