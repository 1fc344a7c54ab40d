"""Naming tiers, ordered from strictest to most permissive.

- STRICT (RFC 1035): every label starts with a letter.
- PERMISSIVE (RFC 1123): labels may start with a digit.
- TRANSPORT (RFC 5321): permissive names plus bracketed IP address literals.

INVARIANT: a label sequence valid at tier T is valid at every tier above T.
Address literals exist only at TRANSPORT.
"""

from __future__ import annotations

from enum import StrEnum


class Tier(StrEnum):
    """Strictness level of a domain-name grammar."""

    STRICT = "strict"
    PERMISSIVE = "permissive"
    TRANSPORT = "transport"

    @property
    def rank(self) -> int:
        """Position in permissiveness order (0 is strictest)."""
        return _RANKS[self]

    def is_stricter_than(self, other: Tier) -> bool:
        return self.rank < other.rank


_RANKS: dict[Tier, int] = {
    Tier.STRICT: 0,
    Tier.PERMISSIVE: 1,
    Tier.TRANSPORT: 2,
}
