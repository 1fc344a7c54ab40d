"""Subcommand modules for domainctl.

register_commands() uses deferred imports to keep ``domainctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``idna`` group and the standalone commands on the root group."""
    # --- Groups ---
    from domainctl.commands.idna import idna

    cli.add_command(idna)

    # --- Standalone commands ---
    from domainctl.commands.hierarchy import add_subdomain, is_subdomain, parent, root, walk
    from domainctl.commands.inspect import compare, inspect

    cli.add_command(inspect)
    cli.add_command(compare)
    cli.add_command(parent)
    cli.add_command(root)
    cli.add_command(walk)
    cli.add_command(add_subdomain)
    cli.add_command(is_subdomain)
