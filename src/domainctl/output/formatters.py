"""Output mode selection for ServiceResult.

Humans get Rich-rendered text, scripts get ``--json`` (the full
ServiceResult) or ``--quiet`` (just the primary value).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from domainctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from domainctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags distilled from DomainSettings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for display according to *settings*.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
