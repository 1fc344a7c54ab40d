"""InspectService — tier breakdown and pairwise comparison of names."""

from __future__ import annotations

from typing import Any

from domainctl.domain.errors import DomainError
from domainctl.domain.names import TieredDomain
from domainctl.services.base import BaseService
from domainctl.services.result import ServiceResult
from domainctl.services.telemetry import traced


def describe(domain: TieredDomain) -> dict[str, Any]:
    """Flat summary of every tier view and name part of *domain*."""
    literal = domain.address_literal
    return {
        "name": domain.name,
        "tier": str(domain.tier),
        "strict": domain.strict.name if domain.strict is not None else None,
        "permissive": domain.permissive.name if domain.permissive is not None else None,
        "transport": str(domain.transport),
        "tld": domain.tld,
        "sld": domain.sld,
        "labels": list(domain.labels),
        "label_count": len(domain.labels),
        "is_address_literal": literal is not None,
        "ip_version": literal.version if literal is not None else None,
        "is_internationalized": domain.is_internationalized,
        "has_a_labels": domain.has_a_labels,
    }


class InspectService(BaseService):
    """Read-only views of one or two domain names."""

    @traced
    def inspect(self, name: str) -> ServiceResult:
        try:
            domain = self._parse(name)
        except DomainError as exc:
            return self._failure("inspect", exc)
        warnings: list[str] = []
        data = describe(domain)
        data["display"] = self._render(domain, warnings)
        return ServiceResult(ok=True, op="inspect", data=data, warnings=warnings)

    @traced
    def compare(self, first: str, second: str) -> ServiceResult:
        """Equality and subdomain relation in both directions."""
        try:
            a = self._parse(first)
            b = self._parse(second)
        except DomainError as exc:
            return self._failure("compare", exc)
        return ServiceResult(
            ok=True,
            op="compare",
            data={
                "first": a.name,
                "second": b.name,
                "equal": a == b,
                "first_is_subdomain": a.is_subdomain_of(b),
                "second_is_subdomain": b.is_subdomain_of(a),
            },
        )
