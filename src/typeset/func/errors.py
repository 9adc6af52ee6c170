"""TypesetError — the uniform failure value of the function protocol.

Errors are values, not control flow: parse and layout wrappers return them
inside a :class:`~typeset.func.result.FuncResult`.  :func:`bail` is the one
exception-shaped helper, and :class:`FuncAbort` never escapes the wrappers.
"""

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import BaseModel, Field

UNEXPECTED_ARGUMENTS = "unexpected arguments"
UNEXPECTED_BODY = "unexpected body"


class ErrorCode:
    """Machine-readable error codes carried alongside the message."""

    UNEXPECTED_ARGUMENTS = "unexpected_arguments"
    UNEXPECTED_BODY = "unexpected_body"
    MISSING_BODY = "missing_body"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_FUNCTION = "unknown_function"
    SYNTAX = "syntax"
    LAYOUT = "layout"


class TypesetError(BaseModel):
    """A failure with a human-readable message."""

    model_config = {"frozen": True}

    code: str = ErrorCode.INVALID_ARGUMENT
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def with_message(cls, message: str, *, code: str = ErrorCode.INVALID_ARGUMENT) -> TypesetError:
        return cls(code=code, message=message)

    def __str__(self) -> str:
        return self.message


class FuncAbort(Exception):
    """Early return out of a parse or layout hook.

    Raised by :func:`bail` and caught by the generated wrappers on
    :class:`~typeset.func.base.Function`, which turn it back into a returned
    failure.
    """

    def __init__(self, error: TypesetError) -> None:
        self.error = error
        super().__init__(error.message)


def error(message: str, *, code: str = ErrorCode.INVALID_ARGUMENT, **detail: Any) -> TypesetError:
    """Build a :class:`TypesetError` from an already formatted message."""
    return TypesetError(code=code, message=message, detail=detail)


def bail(message: str, *, code: str = ErrorCode.INVALID_ARGUMENT, **detail: Any) -> NoReturn:
    """Abort the running hook with a freshly built error.

    Examples::

        if size.points < 0:
            bail(f"negative spacing: {size}")
    """
    raise FuncAbort(error(message, code=code, **detail))


def unexpected_arguments(**detail: Any) -> TypesetError:
    """The canonical error for arguments left over after parsing."""
    return error(UNEXPECTED_ARGUMENTS, code=ErrorCode.UNEXPECTED_ARGUMENTS, **detail)
