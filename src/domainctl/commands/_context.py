"""AppContext — the object every domainctl subcommand receives.

The root group builds it from the resolved DomainSettings. Subcommands get
it through ``@click.pass_obj``, call one service, and hand the result to
:meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from domainctl.config.settings import DomainSettings
    from domainctl.services.result import ServiceResult


class AppContext:
    """Settings plus result emission for one CLI invocation."""

    def __init__(self, settings: DomainSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )

        from domainctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from domainctl.services.telemetry import enable_telemetry

            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        A failed result goes to stderr and exits 1. A successful one goes to
        stdout; its warnings follow on stderr as ``WARNING:`` lines, except
        with ``--json`` where they are part of the payload.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
