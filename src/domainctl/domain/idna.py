"""IDNA transcoding between U-labels and A-labels.

Labels are converted one at a time with the IDNA2008 ``idna`` package
(UTS #46 mapping + Punycode + ``xn--`` prefix), then the whole name is fed
back through :meth:`TieredDomain.parse` so the result obeys the same
invariants as any freshly parsed domain, STRICT upgrade included.

Round trips are approximate: UTS #46 folds case, so
``to_unicode(to_ascii(d))`` can differ from ``d`` in spelling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import idna

from domainctl.domain.errors import IdnaConversionError, InvalidFormatError

if TYPE_CHECKING:
    from domainctl.domain.names import TieredDomain

ACE_PREFIX = "xn--"


def is_a_label(label: str) -> bool:
    """Syntactic check for the ACE prefix; says nothing about decodability."""
    return label[: len(ACE_PREFIX)].lower() == ACE_PREFIX


def encode_label(label: str) -> str:
    """ASCII-encode *label* if it has any non-ASCII code point."""
    if label.isascii():
        return label
    try:
        return idna.encode(label, uts46=True).decode("ascii")
    except UnicodeError as exc:
        raise IdnaConversionError(f"cannot encode label {label!r}: {exc}") from exc


def decode_label(label: str) -> str:
    """Decode an A-label to Unicode; other labels pass through."""
    if not is_a_label(label):
        return label
    try:
        return idna.decode(label.lower())
    except UnicodeError as exc:
        raise IdnaConversionError(f"cannot decode label {label!r}: {exc}") from exc


def to_ascii(domain: TieredDomain) -> TieredDomain:
    """Return a new domain whose non-ASCII labels are A-labels."""
    if domain.address_literal is not None:
        return _rebuild(domain.name, domain)
    return _rebuild(".".join(encode_label(label) for label in domain.labels), domain)


def to_unicode(domain: TieredDomain) -> TieredDomain:
    """Return a new domain whose A-labels are decoded to U-labels."""
    if domain.address_literal is not None:
        return _rebuild(domain.name, domain)
    return _rebuild(".".join(decode_label(label) for label in domain.labels), domain)


def is_internationalized(domain: TieredDomain) -> bool:
    """True if the canonical name contains any non-ASCII code point."""
    return not domain.name.isascii()


def is_ascii(domain: TieredDomain) -> bool:
    """True for pure-ASCII names, whether or not they hold A-labels."""
    return domain.name.isascii()


def has_a_labels(domain: TieredDomain) -> bool:
    return any(is_a_label(segment) for segment in domain.name.split("."))


def _rebuild(name: str, source: TieredDomain) -> TieredDomain:
    from domainctl.domain.names import TieredDomain

    try:
        return TieredDomain.parse(name, grammar=source.grammar)
    except InvalidFormatError as exc:
        raise IdnaConversionError(
            f"{source.name!r} transcoded to invalid name {name!r}: {exc.reason}"
        ) from exc
