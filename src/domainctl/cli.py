"""Root CLI group for domainctl with global flags and command registration."""

from __future__ import annotations

import click

from domainctl import __version__
from domainctl.commands import register_commands
from domainctl.commands._context import AppContext
from domainctl.config.settings import DomainSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="domainctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing telemetry.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """domainctl — tiered domain-name validation and hierarchy tool."""
    ctx.ensure_object(dict)
    settings = DomainSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
