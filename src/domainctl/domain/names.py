"""TieredDomain — one domain name validated against every tier it satisfies.

Internally a domain is one of two forms:

- :class:`LabelForm`: a PERMISSIVE-valid label sequence plus a flag saying
  whether the same sequence also satisfies STRICT.
- :class:`AddressLiteral`: a bracketed IP address, TRANSPORT only.

The ``transport`` / ``permissive`` / ``strict`` accessors are derived from
the form, so the strict view is always the permissive sequence itself and
an address literal can never carry one.

INVARIANT: instances are immutable. Every operation returns a new domain,
None, or raises a :class:`DomainError`; there is no partially valid state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

from domainctl.domain import hierarchy
from domainctl.domain.errors import (
    CannotCreateSubdomainError,
    ConversionFailureError,
    InvalidFormatError,
)
from domainctl.domain.grammar import DEFAULT_GRAMMAR, DomainGrammar, strict_probe
from domainctl.domain.labels import LabelSequence
from domainctl.domain.literals import AddressLiteral
from domainctl.domain.tiers import Tier

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler


@dataclass(frozen=True)
class LabelForm:
    """A label-based domain: PERMISSIVE always, STRICT when flagged."""

    labels: LabelSequence
    is_strict: bool = False


@dataclass(frozen=True, repr=False)
class TieredDomain:
    """A validated domain name with its strictest available representation.

    Build instances with :meth:`parse` (or one of the ``from_*``
    constructors); the dataclass initializer takes an already validated form.

    Examples:
        >>> d = TieredDomain.parse("mail.example.com")
        >>> d.tld, d.sld, d.tier
        ('com', 'example', <Tier.STRICT: 'strict'>)
        >>> d.parent().name
        'example.com'
    """

    form: LabelForm | AddressLiteral
    grammar: DomainGrammar = field(default=DEFAULT_GRAMMAR, compare=False)

    # --- Construction ---

    @classmethod
    def parse(cls, text: str, *, grammar: DomainGrammar = DEFAULT_GRAMMAR) -> TieredDomain:
        """Validate *text* and store every tier it satisfies.

        Raises:
            InvalidFormatError: *text* is neither an address literal nor a
                PERMISSIVE-valid name.
        """
        literal = grammar.parse_literal(text)
        if literal is not None:
            return cls.from_address_literal(literal, grammar=grammar)
        labels = tuple(text.split("."))
        problem = grammar.permissive.problem(labels)
        if problem is not None:
            raise InvalidFormatError(text, problem)
        return cls.from_permissive(LabelSequence(labels), grammar=grammar)

    @classmethod
    def from_labels(
        cls, labels: Iterable[str], *, grammar: DomainGrammar = DEFAULT_GRAMMAR
    ) -> TieredDomain:
        """Join *labels* with dots and parse the result."""
        parts = list(labels)
        if not parts:
            raise InvalidFormatError("", "no labels")
        return cls.parse(".".join(parts), grammar=grammar)

    @classmethod
    def from_strict(
        cls, sequence: LabelSequence, *, grammar: DomainGrammar = DEFAULT_GRAMMAR
    ) -> TieredDomain:
        """Wrap a sequence already known to satisfy STRICT. Never fails."""
        return cls(LabelForm(sequence, is_strict=True), grammar)

    @classmethod
    def from_permissive(
        cls, sequence: LabelSequence, *, grammar: DomainGrammar = DEFAULT_GRAMMAR
    ) -> TieredDomain:
        """Wrap a PERMISSIVE sequence, upgrading to STRICT when it qualifies."""
        upgraded = strict_probe(sequence, grammar)
        return cls(LabelForm(sequence, is_strict=upgraded is not None), grammar)

    @classmethod
    def from_address_literal(
        cls, literal: AddressLiteral, *, grammar: DomainGrammar = DEFAULT_GRAMMAR
    ) -> TieredDomain:
        return cls(literal, grammar)

    @classmethod
    def from_raw_value(
        cls, raw_value: str, *, grammar: DomainGrammar = DEFAULT_GRAMMAR
    ) -> TieredDomain | None:
        """Non-raising constructor: None when *raw_value* is not a domain."""
        try:
            return cls.parse(raw_value, grammar=grammar)
        except InvalidFormatError:
            return None

    # --- Tier views ---

    @property
    def transport(self) -> LabelSequence | AddressLiteral:
        """TRANSPORT view; always present."""
        if isinstance(self.form, LabelForm):
            return self.form.labels
        return self.form

    @property
    def permissive(self) -> LabelSequence | None:
        if isinstance(self.form, LabelForm):
            return self.form.labels
        return None

    @property
    def strict(self) -> LabelSequence | None:
        if isinstance(self.form, LabelForm) and self.form.is_strict:
            return self.form.labels
        return None

    @property
    def tier(self) -> Tier:
        """Strictest tier this domain satisfies."""
        if not isinstance(self.form, LabelForm):
            return Tier.TRANSPORT
        return Tier.STRICT if self.form.is_strict else Tier.PERMISSIVE

    @property
    def is_strict_compliant(self) -> bool:
        return self.strict is not None

    @property
    def is_address_literal(self) -> bool:
        return isinstance(self.form, AddressLiteral)

    @property
    def is_standard_domain(self) -> bool:
        """True for label-based names, False for address literals."""
        return isinstance(self.form, LabelForm)

    @property
    def address_literal(self) -> AddressLiteral | None:
        return self.form if isinstance(self.form, AddressLiteral) else None

    # --- Name parts ---

    @property
    def name(self) -> str:
        """Canonical string, used for display and serialization."""
        if isinstance(self.form, LabelForm):
            return self.form.labels.name
        return self.form.text

    @property
    def raw_value(self) -> str:
        return self.name

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels most specific first; empty for address literals."""
        if isinstance(self.form, LabelForm):
            return self.form.labels.labels
        return ()

    @property
    def tld(self) -> str | None:
        if isinstance(self.form, LabelForm):
            return hierarchy.tld_of(self.form.labels)
        return None

    @property
    def sld(self) -> str | None:
        if isinstance(self.form, LabelForm):
            return hierarchy.sld_of(self.form.labels)
        return None

    # --- Hierarchy ---

    def is_subdomain_of(self, other: TieredDomain) -> bool:
        """True if this name sits strictly below *other*.

        Address literals are never subdomains and have no subdomains.
        """
        mine, theirs = self.permissive, other.permissive
        if mine is None or theirs is None:
            return False
        return hierarchy.is_subdomain(mine, theirs)

    def adding_subdomain(self, *labels: str, allow_downgrade: bool = False) -> TieredDomain:
        """Prefix *labels* in order: ``adding_subdomain("api", "v1")`` -> ``api.v1.<name>``.

        The result is validated at this domain's tier, so a STRICT domain
        rejects labels that only PERMISSIVE allows unless *allow_downgrade*
        is set, in which case the result is PERMISSIVE.

        Raises:
            CannotCreateSubdomainError: address literal receiver, no labels,
                or a label invalid at the target tier.
        """
        if not isinstance(self.form, LabelForm):
            raise CannotCreateSubdomainError(f"{self.name} is an address literal")
        if not labels:
            raise CannotCreateSubdomainError("no labels given")

        candidate = hierarchy.prepend(self.form.labels, labels)
        tier = Tier.STRICT if self.form.is_strict and not allow_downgrade else Tier.PERMISSIVE
        problem = self.grammar.validator_for(tier).problem(candidate.labels)
        if problem is not None:
            raise CannotCreateSubdomainError(f"{candidate.name!r} at {tier} tier: {problem}")
        if tier is Tier.STRICT:
            return self.from_strict(candidate, grammar=self.grammar)
        return self.from_permissive(candidate, grammar=self.grammar)

    def parent(self) -> TieredDomain | None:
        """Drop the leftmost label; None for a single-label name.

        Raises:
            ConversionFailureError: called on an address literal, or the
                shortened name fails re-validation.
        """
        return self._navigate(hierarchy.parent_of, "parent domain")

    def root(self) -> TieredDomain | None:
        """Reduce to SLD + TLD; None for a single-label name."""
        return self._navigate(hierarchy.root_of, "root domain")

    def ancestors(self) -> Iterator[TieredDomain]:
        """Yield each parent in turn, ending with the TLD."""
        current = self.parent()
        while current is not None:
            yield current
            current = current.parent()

    def _navigate(
        self,
        step: Callable[[LabelSequence], LabelSequence | None],
        target: str,
    ) -> TieredDomain | None:
        if not isinstance(self.form, LabelForm):
            raise ConversionFailureError(Tier.TRANSPORT, target)
        result = step(self.form.labels)
        if result is None:
            return None
        # Strictness is re-probed, never inherited: dropping labels can
        # change which rightmost-label rules apply.
        if not self.grammar.permissive.validate(result.labels):
            raise ConversionFailureError(self.tier, target)
        return self.from_permissive(result, grammar=self.grammar)

    # --- IDNA ---

    def to_ascii(self) -> TieredDomain:
        from domainctl.domain.idna import to_ascii

        return to_ascii(self)

    def to_unicode(self) -> TieredDomain:
        from domainctl.domain.idna import to_unicode

        return to_unicode(self)

    @property
    def is_internationalized(self) -> bool:
        from domainctl.domain.idna import is_internationalized

        return is_internationalized(self)

    @property
    def is_ascii(self) -> bool:
        from domainctl.domain.idna import is_ascii

        return is_ascii(self)

    @property
    def has_a_labels(self) -> bool:
        from domainctl.domain.idna import has_a_labels

        return has_a_labels(self)

    # --- Protocols ---

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"TieredDomain({self.name!r}, tier={self.tier.value!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from ``str`` via :meth:`parse`; serialize to :attr:`name`."""
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str],
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
