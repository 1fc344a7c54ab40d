"""Shared pytest fixtures for domainctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from domainctl.config.settings import DomainSettings
from domainctl.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DOMAINCTL_* variables from the host out of every test."""
    import os

    for key in list(os.environ):
        if key.startswith("DOMAINCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_runtime_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("domainctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("domainctl").setLevel(pkg_level)
    disable_telemetry()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory so no domainctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> DomainSettings:
    """Default settings with config discovery rooted in an empty directory."""
    return DomainSettings.from_cli(start=tmp_path)
