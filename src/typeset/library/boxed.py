"""``[box]`` groups nested content."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeset.func.base import Function
from typeset.func.body import BodyPolicy
from typeset.func.result import FuncResult
from typeset.layout.tree import layout_tree
from typeset.syntax.tree import FuncCall, SyntaxTree

if TYPE_CHECKING:
    from typeset.layout.commands import Commands
    from typeset.layout.context import LayoutContext
    from typeset.syntax.args import FuncHeader
    from typeset.syntax.parser import ParseContext


class Box(Function):
    body_policy = BodyPolicy.OPTIONAL

    body: SyntaxTree | None = None

    @classmethod
    def from_invocation(
        cls, header: FuncHeader, body: str | None, ctx: ParseContext
    ) -> Box:
        return cls(body=cls.body_policy.admit(body, ctx))

    def affects_state(self) -> bool:
        # a box does not scope its content; style changes inside it leak out
        if self.body is None:
            return False
        return any(
            isinstance(node, FuncCall) and node.value.affects_state() for node in self.body
        )

    async def commands(self, ctx: LayoutContext) -> FuncResult[Commands]:
        if self.body is None:
            return FuncResult.success([])
        return await layout_tree(self.body, ctx)
