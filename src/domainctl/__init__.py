"""domainctl — tiered domain-name validation and hierarchy navigation."""

__version__ = "0.1.0"
