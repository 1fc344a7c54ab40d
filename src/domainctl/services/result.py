"""ServiceResult and ServiceError — the contract between services and adapters.

INVARIANT: every service method returns a ServiceResult. DomainError
subclasses become a failed result whose error code is the exception's
``code`` (INVALID_FORMAT, CANNOT_CREATE_SUBDOMAIN, ...).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parent"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a display form that could not
            be rendered.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
