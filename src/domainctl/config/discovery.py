"""Locate ``domainctl.toml``.

Lookup order: the file named by ``DOMAINCTL_CONFIG``, then the nearest
``domainctl.toml`` in the start directory or any directory above it.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "domainctl.toml"
CONFIG_ENV_VAR = "DOMAINCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    An env override that names a missing file disables discovery rather
    than falling back to the directory walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
