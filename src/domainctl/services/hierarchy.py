"""HierarchyService — parent, root, walk, and subdomain operations."""

from __future__ import annotations

from collections.abc import Sequence

from domainctl.domain.errors import DomainError
from domainctl.services.base import BaseService
from domainctl.services.result import ServiceResult
from domainctl.services.telemetry import trace_span, traced


class HierarchyService(BaseService):
    """Navigate up and down the label hierarchy of a name."""

    @traced
    def parent(self, name: str) -> ServiceResult:
        op = "parent"
        try:
            domain = self._parse(name)
            with trace_span("navigate"):
                parent = domain.parent()
        except DomainError as exc:
            return self._failure(op, exc)
        warnings: list[str] = []
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": domain.name,
                "parent": self._render(parent, warnings),
                "tier": str(parent.tier) if parent is not None else None,
            },
            warnings=warnings,
        )

    @traced
    def root(self, name: str) -> ServiceResult:
        op = "root"
        try:
            domain = self._parse(name)
            with trace_span("navigate"):
                root = domain.root()
        except DomainError as exc:
            return self._failure(op, exc)
        warnings: list[str] = []
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": domain.name,
                "root": self._render(root, warnings),
                "tier": str(root.tier) if root is not None else None,
            },
            warnings=warnings,
        )

    @traced
    def walk(self, name: str) -> ServiceResult:
        """List *name* and each of its ancestors down to the TLD."""
        op = "walk"
        try:
            domain = self._parse(name)
            with trace_span("navigate"):
                chain = [domain, *domain.ancestors()]
        except DomainError as exc:
            return self._failure(op, exc)
        warnings: list[str] = []
        items = [{"name": self._render(d, warnings), "tier": str(d.tier)} for d in chain]
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": domain.name, "items": items, "count": len(items)},
            warnings=warnings,
        )

    @traced
    def add_subdomain(
        self,
        name: str,
        labels: Sequence[str],
        *,
        allow_downgrade: bool | None = None,
    ) -> ServiceResult:
        """Prefix *labels* to *name*.

        *allow_downgrade* defaults to the ``[hierarchy]`` config value.
        """
        op = "add_subdomain"
        if allow_downgrade is None:
            allow_downgrade = self._settings.hierarchy.allow_downgrade
        try:
            domain = self._parse(name)
            with trace_span("extend"):
                subdomain = domain.adding_subdomain(*labels, allow_downgrade=allow_downgrade)
        except DomainError as exc:
            return self._failure(op, exc)
        warnings: list[str] = []
        if subdomain.tier.rank > domain.tier.rank:
            warnings.append(f"{subdomain.name} is not {domain.tier}; downgraded to {subdomain.tier}")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": domain.name,
                "subdomain": self._render(subdomain, warnings),
                "tier": str(subdomain.tier),
            },
            warnings=warnings,
        )

    @traced
    def is_subdomain(self, child: str, parent: str) -> ServiceResult:
        op = "is_subdomain"
        try:
            child_domain = self._parse(child)
            parent_domain = self._parse(parent)
        except DomainError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "child": child_domain.name,
                "parent": parent_domain.name,
                "is_subdomain": child_domain.is_subdomain_of(parent_domain),
            },
        )
