"""Command tests run from an empty directory so no config file is picked up."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_cwd(workdir: Path) -> Path:
    return workdir
