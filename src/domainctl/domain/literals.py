"""Bracketed IP address literals — the TRANSPORT-only domain form.

Accepted spellings::

    [192.168.1.1]
    [IPv6:2001:db8::1]
    [2001:db8::1]

Literals have no labels, so they carry no TLD, SLD, or hierarchy.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

_IPV6_TAG = "ipv6:"


@dataclass(frozen=True)
class AddressLiteral:
    """An IPv4 or IPv6 address used in place of a host name."""

    address: ipaddress.IPv4Address | ipaddress.IPv6Address

    @property
    def text(self) -> str:
        """Canonical bracketed form (``ipaddress`` rendering, no tag)."""
        return f"[{self.address}]"

    @property
    def version(self) -> int:
        return self.address.version

    def __str__(self) -> str:
        return self.text


def parse_address_literal(text: str) -> AddressLiteral | None:
    """Parse *text* as a bracketed address literal.

    Returns None when *text* is not a well-formed literal; callers fall
    through to label validation in that case.
    """
    if len(text) < 3 or text[0] != "[" or text[-1] != "]":
        return None
    inner = text[1:-1]
    address: ipaddress.IPv4Address | ipaddress.IPv6Address
    try:
        if inner[: len(_IPV6_TAG)].lower() == _IPV6_TAG:
            address = ipaddress.IPv6Address(inner[len(_IPV6_TAG) :])
        elif ":" in inner:
            address = ipaddress.IPv6Address(inner)
        else:
            address = ipaddress.IPv4Address(inner)
    except ValueError:
        return None
    return AddressLiteral(address)
