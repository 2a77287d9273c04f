"""ServiceResult and ServiceError — the service-layer contract.

INVARIANT: all service methods return ServiceResult; taxonomy exceptions
raised by the domain layer are converted here and never reach the CLI.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from domaincrafters_std.domain.exceptions import StdException


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(
        cls,
        exc: StdException,
        *,
        code: str | None = None,
        **detail: Any,
    ) -> ServiceError:
        """Build an error from a taxonomy exception.

        The code defaults to the exception kind in upper case
        (``ILLEGAL_ARGUMENT``, ``NOT_FOUND``, ...).
        """
        return cls(code=code or exc.kind.upper(), message=exc.message, detail=detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse_uuid"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
