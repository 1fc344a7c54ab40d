"""Tests for telemetry primitives and their use by services."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from domainctl.config.settings import DomainSettings
from domainctl.services.hierarchy import HierarchyService
from domainctl.services.result import ServiceError, ServiceResult
from domainctl.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_annotate(self) -> None:
        span = Span(name="test")
        span.annotate("tier", "strict")
        span.end()
        assert span.to_dict()["annotations"] == {"tier": "strict"}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("test") as span:
            assert span is None

    def test_no_root_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("test") as span:
            assert span is None

    def test_nested_spans(self) -> None:
        enable_telemetry()
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            with trace_span("a"):
                with trace_span("b"):
                    pass
        finally:
            _current_span.reset(token)
        assert root.children[0].name == "a"
        assert root.children[0].children[0].name == "b"
        assert root.children[0].end_time is not None


class TestTracedDecorator:
    def test_noop_when_disabled(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(ok=True, op="test")

        assert my_func().meta is None

    def test_preserves_existing_meta(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(ok=True, op="test", meta={"existing": "data"})

        enable_telemetry()
        result = my_func()
        assert result.meta is not None
        assert result.meta["existing"] == "data"
        assert "telemetry" in result.meta

    def test_error_result_gets_telemetry(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(
                ok=False,
                op="test",
                error=ServiceError(code="FAIL", message="oops"),
            )

        enable_telemetry()
        result = my_func()
        assert result.meta is not None
        assert "telemetry" in result.meta

    def test_exception_propagates(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            msg = "boom"
            raise RuntimeError(msg)

        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            my_func()
        assert _current_span.get() is None

    def test_non_service_result_passthrough(self) -> None:
        @traced
        def my_func() -> str:
            return "hello"

        enable_telemetry()
        assert my_func() == "hello"


class TestGetCurrentSpan:
    def test_none_when_disabled(self) -> None:
        assert get_current_span() is None

    def test_inside_traced(self) -> None:
        seen: list[Span | None] = []

        @traced
        def my_func() -> ServiceResult:
            seen.append(get_current_span())
            return ServiceResult(ok=True, op="test")

        enable_telemetry()
        my_func()
        assert seen[0] is not None
        assert seen[0].name.endswith("my_func")


class TestServiceSpans:
    def test_parent_span_tree(self, settings: DomainSettings) -> None:
        enable_telemetry()
        result = HierarchyService(settings).parent("mail.example.com")
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "HierarchyService.parent"
        names = [child["name"] for child in tree["children"]]
        assert names == ["parse", "navigate"]
        assert tree["children"][0]["annotations"] == {"tier": "strict"}

    def test_no_meta_when_disabled(self, settings: DomainSettings) -> None:
        assert HierarchyService(settings).parent("mail.example.com").meta is None

    def test_failed_call_records_error_code(self, settings: DomainSettings) -> None:
        enable_telemetry()
        result = HierarchyService(settings).parent("[192.168.1.1]")
        assert not result.ok
        assert result.meta is not None
        assert result.meta["telemetry"]["annotations"] == {"error": "CONVERSION_FAILURE"}
