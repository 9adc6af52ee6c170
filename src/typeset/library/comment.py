"""``[comment][...]`` keeps its body as raw text and produces no output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeset.func.base import Function
from typeset.func.body import BodyPolicy

if TYPE_CHECKING:
    from typeset.syntax.args import FuncHeader


class Comment(Function):
    body_policy = BodyPolicy.OPTIONAL

    text: str | None = None

    @classmethod
    def from_invocation(cls, header: FuncHeader, body: str | None) -> Comment:
        # body is kept verbatim; nested invocations inside it are not parsed
        return cls(text=body)
