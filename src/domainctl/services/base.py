"""BaseService — shared plumbing for domainctl services.

Services parse their inputs through the configured grammar, render names
in the configured IDNA output form, and turn DomainError into a failed
ServiceResult instead of letting it escape.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domainctl.domain.errors import DomainError
from domainctl.domain.grammar import DEFAULT_GRAMMAR, DomainGrammar
from domainctl.domain.names import TieredDomain
from domainctl.services.result import ServiceError, ServiceResult
from domainctl.services.telemetry import trace_span

if TYPE_CHECKING:
    from domainctl.config.settings import DomainSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class InspectService(BaseService):
            def inspect(self, name: str) -> ServiceResult:
                try:
                    domain = self._parse(name)
                except DomainError as exc:
                    return self._failure("inspect", exc)
                ...
    """

    def __init__(
        self,
        settings: DomainSettings | None = None,
        *,
        grammar: DomainGrammar = DEFAULT_GRAMMAR,
    ) -> None:
        if settings is None:
            from domainctl.config.settings import DomainSettings

            settings = DomainSettings()
        self._settings = settings
        self._grammar = grammar

    def _parse(self, name: str) -> TieredDomain:
        with trace_span("parse") as span:
            domain = TieredDomain.parse(name, grammar=self._grammar)
            if span:
                span.annotate("tier", str(domain.tier))
        return domain

    def _render(self, domain: TieredDomain | None, warnings: list[str]) -> str | None:
        """Render *domain* in the configured ``[idna] output_form``.

        A name that cannot be transcoded is shown as-is with a warning.
        """
        if domain is None:
            return None
        form = self._settings.idna.output_form
        if form == "as-is":
            return domain.name
        try:
            converted = domain.to_ascii() if form == "ascii" else domain.to_unicode()
        except DomainError as exc:
            warnings.append(f"Could not render {domain.name} as {form}: {exc}")
            return domain.name
        return converted.name

    @staticmethod
    def _failure(op: str, exc: DomainError) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail()),
        )
