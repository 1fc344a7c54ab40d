"""Label sequences and per-tier label grammars.

A domain name is a dot-separated sequence of labels, most specific first
(``www.example.com`` -> ``("www", "example", "com")``).

Grammar rules shared by every label tier:
- A label is 1-63 characters of letters, digits, and hyphens.
- No label starts or ends with a hyphen.
- The rightmost (top-level) label starts and ends with a letter.
- The joined name, dots included, is at most 253 characters.

STRICT additionally requires ASCII letters and a leading letter.
PERMISSIVE allows a leading digit and any Unicode letter, so U-labels
like ``café`` survive until they are ASCII-encoded.

Labels compare case-insensitively; the original casing is kept for display.
"""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from domainctl.domain.tiers import Tier

MAX_LABEL_LENGTH = 63
MAX_NAME_LENGTH = 253

_STRICT_LABEL = re.compile(r"[A-Za-z](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_STRICT_TLD = re.compile(r"[A-Za-z](?:[A-Za-z0-9-]*[A-Za-z])?")


@dataclass(frozen=True, eq=False)
class LabelSequence:
    """An ordered, non-empty run of labels, most specific first.

    Equality and hashing use the lower-cased labels, position for position.
    """

    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.labels:
            raise ValueError("LabelSequence requires at least one label")

    @classmethod
    def from_name(cls, name: str) -> LabelSequence:
        return cls(tuple(name.split(".")))

    @property
    def name(self) -> str:
        return ".".join(self.labels)

    @property
    def key(self) -> tuple[str, ...]:
        """Comparison key: labels lower-cased."""
        return tuple(label.lower() for label in self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelSequence):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.name


class LabelValidator(Protocol):
    """Syntax capability for one tier of label grammar."""

    @property
    def tier(self) -> Tier: ...

    def validate_label(self, label: str) -> bool: ...

    def problem(self, labels: Sequence[str]) -> str | None: ...

    def validate(self, labels: Sequence[str]) -> bool: ...

    def extract_tld(self, sequence: LabelSequence) -> str | None: ...

    def extract_sld(self, sequence: LabelSequence) -> str | None: ...


@dataclass(frozen=True)
class GrammarValidator:
    """Stateless :class:`LabelValidator` built from two predicates.

    *label_check* decides the character shape of any label and *tld_check*
    the extra constraint on the rightmost one. Length limits are applied
    here so predicates only describe shape.
    """

    tier: Tier
    label_check: Callable[[str], bool]
    tld_check: Callable[[str], bool]
    max_label_length: int = MAX_LABEL_LENGTH
    max_name_length: int = MAX_NAME_LENGTH

    def validate_label(self, label: str) -> bool:
        return 0 < len(label) <= self.max_label_length and self.label_check(label)

    def problem(self, labels: Sequence[str]) -> str | None:
        """Return the first reason *labels* is invalid, or None if valid."""
        if not labels:
            return "no labels"
        if len(".".join(labels)) > self.max_name_length:
            return f"name exceeds {self.max_name_length} characters"
        for label in labels:
            if not label:
                return "empty label"
            if len(label) > self.max_label_length:
                return f"label {label!r} exceeds {self.max_label_length} characters"
            if not self.label_check(label):
                return f"invalid {self.tier} label {label!r}"
        if not self.tld_check(labels[-1]):
            return f"invalid {self.tier} top-level label {labels[-1]!r}"
        return None

    def validate(self, labels: Sequence[str]) -> bool:
        return self.problem(labels) is None

    def extract_tld(self, sequence: LabelSequence) -> str | None:
        tld = sequence.labels[-1]
        return tld if self.tld_check(tld) else None

    def extract_sld(self, sequence: LabelSequence) -> str | None:
        if len(sequence) < 2:
            return None
        sld = sequence.labels[-2]
        return sld if self.validate_label(sld) else None


def is_strict_label(label: str) -> bool:
    return _STRICT_LABEL.fullmatch(label) is not None


def is_strict_tld(label: str) -> bool:
    return _STRICT_TLD.fullmatch(label) is not None


def is_permissive_label(label: str) -> bool:
    """Letters (any script), ASCII digits, inner hyphens."""
    if not label or label[0] == "-" or label[-1] == "-":
        return False
    return all(ch.isalpha() or ch in string.digits or ch == "-" for ch in label)


def is_permissive_tld(label: str) -> bool:
    return is_permissive_label(label) and label[0].isalpha() and label[-1].isalpha()


STRICT_VALIDATOR = GrammarValidator(
    tier=Tier.STRICT,
    label_check=is_strict_label,
    tld_check=is_strict_tld,
)

PERMISSIVE_VALIDATOR = GrammarValidator(
    tier=Tier.PERMISSIVE,
    label_check=is_permissive_label,
    tld_check=is_permissive_tld,
)
