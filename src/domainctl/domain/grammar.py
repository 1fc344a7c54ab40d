"""DomainGrammar — the injected bundle of tier validators.

``TieredDomain`` never reaches for module-level validators directly; it
carries a grammar so tests can swap in synthetic rules.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from domainctl.domain.labels import (
    PERMISSIVE_VALIDATOR,
    STRICT_VALIDATOR,
    LabelSequence,
    LabelValidator,
)
from domainctl.domain.literals import AddressLiteral, parse_address_literal
from domainctl.domain.tiers import Tier


@dataclass(frozen=True)
class DomainGrammar:
    """Validators for each tier plus the address-literal parser."""

    strict: LabelValidator
    permissive: LabelValidator
    parse_literal: Callable[[str], AddressLiteral | None] = parse_address_literal

    def validator_for(self, tier: Tier) -> LabelValidator:
        """Label validator for *tier*; TRANSPORT labels follow PERMISSIVE."""
        if tier is Tier.STRICT:
            return self.strict
        return self.permissive


DEFAULT_GRAMMAR = DomainGrammar(strict=STRICT_VALIDATOR, permissive=PERMISSIVE_VALIDATOR)


def strict_probe(sequence: LabelSequence, grammar: DomainGrammar) -> LabelSequence | None:
    """Return *sequence* itself if it also satisfies STRICT, else None.

    Failure here is expected and never raised: STRICT is an optional
    refinement of an already valid PERMISSIVE sequence.
    """
    if grammar.strict.validate(sequence.labels):
        return sequence
    return None
