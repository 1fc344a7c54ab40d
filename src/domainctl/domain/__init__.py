"""Domain layer — tiers, label grammars, and the TieredDomain value type.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""

from __future__ import annotations

from domainctl.domain.errors import (
    CannotCreateSubdomainError,
    ConversionFailureError,
    DomainError,
    IdnaConversionError,
    InvalidFormatError,
)
from domainctl.domain.names import TieredDomain
from domainctl.domain.tiers import Tier

__all__ = [
    "CannotCreateSubdomainError",
    "ConversionFailureError",
    "DomainError",
    "IdnaConversionError",
    "InvalidFormatError",
    "Tier",
    "TieredDomain",
]
