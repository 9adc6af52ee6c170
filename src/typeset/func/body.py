"""Body admission policies.

Three reusable rules decide whether an invocation may carry a body and how
the body is parsed:

- ``forbidden``: a body fails with ``"unexpected body"``.
- ``optional``: a body is parsed as nested document content; no body
  yields ``None``.
- ``expected``: no body fails; a body is parsed as with ``optional``.

The helpers abort the running parse hook through :func:`bail`, so a hook
reads like straight-line code::

    @classmethod
    def from_invocation(cls, header, body, ctx):
        return cls(body=optional(body, ctx))
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from typeset.func.errors import UNEXPECTED_BODY, ErrorCode, bail

if TYPE_CHECKING:
    from typeset.syntax.parser import ParseContext
    from typeset.syntax.tree import SyntaxTree


class BodyPolicy(StrEnum):
    """Declared body admission rule of a command kind."""

    FORBIDDEN = "forbidden"
    OPTIONAL = "optional"
    EXPECTED = "expected"

    def admit(self, body: str | None, ctx: ParseContext) -> SyntaxTree | None:
        """Apply this policy to *body*."""
        if self is BodyPolicy.FORBIDDEN:
            forbidden(body)
            return None
        if self is BodyPolicy.OPTIONAL:
            return optional(body, ctx)
        return expected(body, ctx)


def forbidden(body: str | None) -> None:
    """Fail if a body is present."""
    if body is not None:
        bail(UNEXPECTED_BODY, code=ErrorCode.UNEXPECTED_BODY)


def optional(body: str | None, ctx: ParseContext) -> SyntaxTree | None:
    """Parse *body* under *ctx* if present, otherwise return ``None``."""
    if body is None:
        return None
    from typeset.syntax.parser import parse

    return parse(body, ctx).unwrap()


def expected(body: str | None, ctx: ParseContext) -> SyntaxTree:
    """Parse *body* under *ctx*, failing if it is absent.

    The failure keeps the ``"unexpected body"`` message and is told apart
    from the forbidden case by its ``missing_body`` code.
    """
    if body is None:
        bail(UNEXPECTED_BODY, code=ErrorCode.MISSING_BODY)
    tree = optional(body, ctx)
    assert tree is not None
    return tree
