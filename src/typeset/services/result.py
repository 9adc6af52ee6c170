"""ServiceResult and ServiceError — what the CLI receives from a pipeline run.

INVARIANT: every DocumentService method returns a ServiceResult.
Protocol failures (:class:`~typeset.func.errors.TypesetError`) become the
``error`` of a failed result; they are never raised past this layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from typeset.func.errors import TypesetError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_typeset(cls, err: TypesetError, **detail: Any) -> ServiceError:
        return cls(code=err.code, message=err.message, detail={**err.detail, **detail})


class ServiceResult(BaseModel):
    """Universal return type for pipeline operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"parse"``, ``"layout"``, ``"functions"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (document name, timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
