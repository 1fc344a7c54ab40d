"""Hierarchy engine — tier-agnostic algorithms over label sequences.

Each function works on a :class:`LabelSequence` and returns a new one (or
a plain value). Re-validation of results is the caller's job, because the
rightmost-label rules can change when labels are added or removed.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from domainctl.domain.labels import LabelSequence


def tld_of(sequence: LabelSequence) -> str:
    """Rightmost label. A single-label name is its own TLD."""
    return sequence.labels[-1]


def sld_of(sequence: LabelSequence) -> str | None:
    """Second label from the right, or None for single-label names."""
    if len(sequence) < 2:
        return None
    return sequence.labels[-2]


def parent_of(sequence: LabelSequence) -> LabelSequence | None:
    """Drop the leftmost label. None when only the TLD remains."""
    if len(sequence) < 2:
        return None
    return LabelSequence(sequence.labels[1:])


def root_of(sequence: LabelSequence) -> LabelSequence | None:
    """Keep only SLD + TLD. None when fewer than two labels exist."""
    if len(sequence) < 2:
        return None
    return LabelSequence(sequence.labels[-2:])


def prepend(sequence: LabelSequence, new_labels: Sequence[str]) -> LabelSequence:
    """Prefix *new_labels* in the order given: ``("api", "v1")`` -> ``api.v1.<name>``."""
    return LabelSequence((*new_labels, *sequence.labels))


def is_subdomain(child: LabelSequence, parent: LabelSequence) -> bool:
    """True if *child* is strictly longer and ends with all of *parent*'s labels.

    Comparison is case-insensitive and position for position, so
    ``notexample.com`` is not a subdomain of ``example.com`` and no
    sequence is a subdomain of itself.
    """
    if len(child) <= len(parent):
        return False
    return child.key[-len(parent) :] == parent.key


def ancestors_of(sequence: LabelSequence) -> Iterator[LabelSequence]:
    """Yield successive parents up to and including the TLD."""
    current = parent_of(sequence)
    while current is not None:
        yield current
        current = parent_of(current)
