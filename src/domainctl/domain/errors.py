"""Domain error taxonomy.

Every failure raised by the domain layer derives from :class:`DomainError`,
which is a :class:`ValueError` so pydantic reports construction failures as
ordinary validation errors. Each class carries a stable ``code`` that the
service layer copies into ``ServiceError.code``.

The opportunistic STRICT probe never raises; it returns ``None`` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from domainctl.domain.tiers import Tier


class DomainError(ValueError):
    """Base type for all domain-name failures."""

    code: ClassVar[str] = "DOMAIN_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured payload for ``ServiceError.detail``."""
        return {}


class InvalidFormatError(DomainError):
    """The input satisfies no tier and is not an address literal."""

    code: ClassVar[str] = "INVALID_FORMAT"

    def __init__(self, raw_input: str, reason: str | None = None) -> None:
        self.raw_input = raw_input
        self.reason = reason
        message = f"Invalid domain format: {raw_input!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def detail(self) -> dict[str, Any]:
        return {"raw_input": self.raw_input, "reason": self.reason}


class CannotCreateSubdomainError(DomainError):
    """Subdomain creation on an address literal, or with bad/empty labels."""

    code: ClassVar[str] = "CANNOT_CREATE_SUBDOMAIN"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot create subdomain: {reason}")

    def detail(self) -> dict[str, Any]:
        return {"reason": self.reason}


class ConversionFailureError(DomainError):
    """A tier conversion or hierarchy re-validation step failed.

    Seeing this from a label-based domain means two tier grammars disagree,
    which is a logic bug rather than bad user input. Address literals raise
    it for ``parent()`` and ``root()`` because they have no hierarchy.
    """

    code: ClassVar[str] = "CONVERSION_FAILURE"

    def __init__(self, from_tier: Tier, target: str) -> None:
        self.from_tier = from_tier
        self.target = target
        super().__init__(f"Failed to convert from {from_tier} to {target}")

    def detail(self) -> dict[str, Any]:
        return {"from_tier": str(self.from_tier), "target": self.target}


class IdnaConversionError(DomainError):
    """ASCII/Unicode transcoding failed for a label."""

    code: ClassVar[str] = "IDNA_CONVERSION_FAILURE"

    def __init__(self, detail: str) -> None:
        self.reason = detail
        super().__init__(f"IDNA conversion failed: {detail}")

    def detail(self) -> dict[str, Any]:
        return {"reason": self.reason}
