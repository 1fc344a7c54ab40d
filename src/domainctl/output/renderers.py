"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall back to a key-value listing. Values are always wrapped in
``Text`` so bracketed address literals are never read as Rich markup.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from domainctl.output.console import create_console, get_output, style_for_tier

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from domainctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value, for ``--quiet`` and shell pipelines."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if result.op == "walk":
        return "\n".join(str(item["name"]) for item in result.data.get("items", []))
    if key is None:
        return f"OK: {result.op}"
    value = result.data.get(key)
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dom.ok"), Text(f"  {result.op}", style="dom.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dom.key")
    if value is None:
        v = Text("-", style="dim")
    elif key == "tier":
        v = Text(str(value), style=style_for_tier(str(value)))
    elif key in _NAME_KEYS:
        v = Text(str(value), style="dom.name")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    line = Text(f"{prefix}{duration:>8.3f}ms  ", style="dim")
    line.append(str(name))
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="dom.error"),
        Text(f"  {result.op}", style="dom.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console) -> None:
    """Name header plus a table of the three tier views."""
    d = result.data
    _status_line(console, result)
    _field(console, "name", d.get("name"))
    _field(console, "tier", d.get("tier"))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Tier")
    table.add_column("Representation", style="dom.name")
    for tier in ("strict", "permissive", "transport"):
        value = d.get(tier)
        table.add_row(
            Text(tier, style=style_for_tier(tier)),
            Text(str(value)) if value is not None else Text("-", style="dim"),
        )
    console.print(table)

    for key in ("tld", "sld", "labels", "ip_version", "is_internationalized", "has_a_labels"):
        if key in d:
            _field(console, key, d[key])
    if d.get("display") not in (None, d.get("name")):
        _field(console, "display", d["display"])


def _render_walk(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="dom.name")
    table.add_column("Tier")
    for i, item in enumerate(result.data.get("items", [])):
        tier = str(item.get("tier", ""))
        table.add_row(str(i), Text(str(item.get("name", ""))), Text(tier, style=style_for_tier(tier)))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch tables ───────────────────────────────────────────────────

_NAME_KEYS = frozenset(
    {"name", "parent", "root", "subdomain", "child", "first", "second", "ascii", "unicode"}
)

_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "inspect": _render_inspect,
    "walk": _render_walk,
}

_QUIET_KEYS: dict[str, str] = {
    "inspect": "name",
    "parent": "parent",
    "root": "root",
    "add_subdomain": "subdomain",
    "is_subdomain": "is_subdomain",
    "compare": "equal",
    "to_ascii": "ascii",
    "to_unicode": "unicode",
}
