"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, ``domainctl.toml`` only holds
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

OutputForm = Literal["as-is", "ascii", "unicode"]


class IdnaConfig(BaseModel):
    """[idna] section."""

    model_config = {"frozen": True}

    # How domain names are rendered in command output.
    output_form: OutputForm = "as-is"


class HierarchyConfig(BaseModel):
    """[hierarchy] section."""

    model_config = {"frozen": True}

    # Let add-subdomain drop a STRICT name to PERMISSIVE instead of failing.
    allow_downgrade: bool = False
