"""Commands: walk the label hierarchy of a name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomainCommand

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext


@click.command(
    cls=DomainCommand,
    examples="""\
  domainctl parent mail.example.com
  domainctl -q parent mail.example.com""",
)
@click.argument("name")
@click.pass_obj
def parent(app: AppContext, name: str) -> None:
    """Print NAME without its leftmost label."""
    from domainctl.services.hierarchy import HierarchyService

    app.emit(HierarchyService(app.settings).parent(name))


@click.command(
    cls=DomainCommand,
    examples="""\
  domainctl root a.b.example.com""",
)
@click.argument("name")
@click.pass_obj
def root(app: AppContext, name: str) -> None:
    """Print the SLD + TLD of NAME."""
    from domainctl.services.hierarchy import HierarchyService

    app.emit(HierarchyService(app.settings).root(name))


@click.command(
    cls=DomainCommand,
    examples="""\
  domainctl walk api.v1.example.com
  domainctl -q walk api.v1.example.com""",
)
@click.argument("name")
@click.pass_obj
def walk(app: AppContext, name: str) -> None:
    """List NAME and every ancestor down to its TLD."""
    from domainctl.services.hierarchy import HierarchyService

    app.emit(HierarchyService(app.settings).walk(name))


@click.command(
    "add-subdomain",
    cls=DomainCommand,
    examples="""\
  domainctl add-subdomain example.com www
  domainctl add-subdomain example.com api v1
  domainctl add-subdomain --allow-downgrade example.com 123""",
)
@click.argument("name")
@click.argument("labels", nargs=-1, required=True)
@click.option(
    "--allow-downgrade",
    is_flag=True,
    help="Let a strict name accept labels that only the permissive tier allows.",
)
@click.pass_obj
def add_subdomain(
    app: AppContext,
    name: str,
    labels: tuple[str, ...],
    allow_downgrade: bool,
) -> None:
    """Prefix LABELS (in order) to NAME."""
    from domainctl.services.hierarchy import HierarchyService

    svc = HierarchyService(app.settings)
    app.emit(svc.add_subdomain(name, labels, allow_downgrade=allow_downgrade or None))


@click.command(
    "is-subdomain",
    cls=DomainCommand,
    examples="""\
  domainctl is-subdomain mail.example.com example.com
  domainctl -q is-subdomain example.com mail.example.com""",
)
@click.argument("child")
@click.argument("parent_name", metavar="PARENT")
@click.pass_obj
def is_subdomain(app: AppContext, child: str, parent_name: str) -> None:
    """Check whether CHILD sits strictly below PARENT."""
    from domainctl.services.hierarchy import HierarchyService

    app.emit(HierarchyService(app.settings).is_subdomain(child, parent_name))
