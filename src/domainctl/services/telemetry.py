"""Per-call timing for domainctl services.

``-v`` turns collection on. Each ``@traced`` service method then opens a
root span, ``trace_span`` blocks inside it (parse, navigate, encode, ...)
add children, and the finished tree is attached to the returned
``ServiceResult`` as ``meta["telemetry"]``. With collection off, both
helpers cost one ContextVar read.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from domainctl.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)

log = structlog.get_logger("domainctl.telemetry")


@dataclass
class Span:
    """One timed step; ``children`` are the steps run inside it."""

    name: str
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready tree; empty annotations and children are left out."""
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            out["annotations"] = self.annotations
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time the enclosed block as a child of the active span.

    Yields None outside a traced call or when collection is off.
    """
    parent = _current_span.get() if _verbose_enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    token = _current_span.set(child)
    try:
        yield child
    finally:
        child.end()
        _current_span.reset(token)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Run *func* under a root span named after its qualified name."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        except Exception:
            _close(span, token, ok=False)
            raise
        if not isinstance(result, ServiceResult):
            _close(span, token, ok=True)
            return result

        if result.error is not None:
            span.annotate("error", result.error.code)
        _close(span, token, ok=result.ok)
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def _close(span: Span, token: Any, *, ok: bool) -> None:
    span.end()
    _current_span.reset(token)
    log.debug(
        "span.complete",
        span_name=span.name,
        duration_ms=round(span.duration_ms, 3),
        ok=ok,
        children=len(span.children),
    )


def enable_telemetry() -> None:
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    _verbose_enabled.set(False)


def get_current_span() -> Span | None:
    """The innermost open span, for ad-hoc annotations; None when off."""
    if not _verbose_enabled.get():
        return None
    return _current_span.get()
