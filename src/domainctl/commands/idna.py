"""Command group: IDNA conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domainctl.commands._base import DomainGroup

if TYPE_CHECKING:
    from domainctl.commands._context import AppContext


@click.group(
    cls=DomainGroup,
    examples="""\
  domainctl idna to-ascii café.com
  domainctl idna to-unicode xn--caf-dma.com""",
)
def idna() -> None:
    """Convert names between Unicode and ASCII-compatible form."""


@idna.command("to-ascii", examples="  domainctl idna to-ascii münchen.de")
@click.argument("name")
@click.pass_obj
def to_ascii(app: AppContext, name: str) -> None:
    """Encode non-ASCII labels of NAME as xn-- A-labels."""
    from domainctl.services.transcode import TranscodeService

    app.emit(TranscodeService(app.settings).to_ascii(name))


@idna.command("to-unicode", examples="  domainctl idna to-unicode xn--mnchen-3ya.de")
@click.argument("name")
@click.pass_obj
def to_unicode(app: AppContext, name: str) -> None:
    """Decode the xn-- A-labels of NAME to Unicode."""
    from domainctl.services.transcode import TranscodeService

    app.emit(TranscodeService(app.settings).to_unicode(name))
