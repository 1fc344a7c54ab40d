"""Rich Console factory and theme for domainctl output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function. Rich drops color codes automatically
when the target is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DOMAIN_THEME = Theme(
    {
        "dom.ok": "bold green",
        "dom.error": "bold red",
        "dom.warning": "bold yellow",
        "dom.op": "bold cyan",
        "dom.key": "dim",
        "dom.name": "bold blue",
        "dom.tier.strict": "green",
        "dom.tier.permissive": "yellow",
        "dom.tier.transport": "magenta",
    }
)

_TIER_STYLES: dict[str, str] = {
    "strict": "dom.tier.strict",
    "permissive": "dom.tier.permissive",
    "transport": "dom.tier.transport",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=DOMAIN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str | None) -> str:
    return _TIER_STYLES.get(tier or "", "")
