"""Commands: inspect a name's tiers, compare two names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomainCommand

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext


@click.command(
    cls=DomainCommand,
    examples="""\
  domainctl inspect example.com
  domainctl inspect 123.example.com
  domainctl inspect '[192.168.1.1]'
  domainctl --json inspect café.com""",
)
@click.argument("name")
@click.pass_obj
def inspect(app: AppContext, name: str) -> None:
    """Show which tiers NAME satisfies, with its TLD, SLD and labels."""
    from domainctl.services.inspection import InspectService

    app.emit(InspectService(app.settings).inspect(name))


@click.command(
    cls=DomainCommand,
    examples="""\
  domainctl compare www.example.com example.com
  domainctl compare Example.COM example.com""",
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def compare(app: AppContext, first: str, second: str) -> None:
    """Compare FIRST and SECOND for equality and subdomain relation."""
    from domainctl.services.inspection import InspectService

    app.emit(InspectService(app.settings).compare(first, second))
