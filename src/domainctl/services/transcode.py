"""TranscodeService — IDNA conversion between U-labels and A-labels."""

from __future__ import annotations

from domainctl.domain.errors import DomainError
from domainctl.services.base import BaseService
from domainctl.services.result import ServiceResult
from domainctl.services.telemetry import trace_span, traced


class TranscodeService(BaseService):
    """Convert names to ASCII-compatible or Unicode form."""

    @traced
    def to_ascii(self, name: str) -> ServiceResult:
        op = "to_ascii"
        try:
            domain = self._parse(name)
            with trace_span("encode"):
                converted = domain.to_ascii()
        except DomainError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": domain.name,
                "ascii": converted.name,
                "tier": str(converted.tier),
                "has_a_labels": converted.has_a_labels,
            },
        )

    @traced
    def to_unicode(self, name: str) -> ServiceResult:
        op = "to_unicode"
        try:
            domain = self._parse(name)
            with trace_span("decode"):
                converted = domain.to_unicode()
        except DomainError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": domain.name,
                "unicode": converted.name,
                "tier": str(converted.tier),
                "is_internationalized": converted.is_internationalized,
            },
        )
