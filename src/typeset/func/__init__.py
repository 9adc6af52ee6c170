"""Function protocol — parse and layout capabilities of command kinds."""

from typeset.func.errors import (
    UNEXPECTED_ARGUMENTS,
    UNEXPECTED_BODY,
    ErrorCode,
    FuncAbort,
    TypesetError,
    bail,
    error,
    unexpected_arguments,
)
from typeset.func.result import FuncResult, LayoutResult, ParseResult
from typeset.func.body import BodyPolicy, expected, forbidden, optional
from typeset.func.base import Function
from typeset.func.scope import FuncEntry, Scope

__all__ = [
    "UNEXPECTED_ARGUMENTS",
    "UNEXPECTED_BODY",
    "BodyPolicy",
    "ErrorCode",
    "FuncAbort",
    "FuncEntry",
    "FuncResult",
    "Function",
    "LayoutResult",
    "ParseResult",
    "Scope",
    "TypesetError",
    "bail",
    "error",
    "expected",
    "forbidden",
    "optional",
    "unexpected_arguments",
]
