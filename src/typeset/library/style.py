"""Text style toggles: ``[bold]`` and ``[italic]``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeset.func.base import Function
from typeset.func.body import BodyPolicy, forbidden, optional
from typeset.layout.commands import Commands, SetTextStyle
from typeset.layout.tree import layout_tree
from typeset.syntax.tree import SyntaxTree

if TYPE_CHECKING:
    from typeset.layout.context import LayoutContext
    from typeset.syntax.args import FuncHeader
    from typeset.syntax.parser import ParseContext


class Bold(Function):
    """``[bold]`` toggles bold text for everything that follows."""

    body_policy = BodyPolicy.FORBIDDEN
    stateful = True

    @classmethod
    def from_invocation(cls, header: FuncHeader, body: str | None) -> Bold:
        forbidden(body)
        return cls()

    async def commands(self, ctx: LayoutContext) -> Commands:
        style = ctx.style.model_copy(update={"bold": not ctx.style.bold})
        return [SetTextStyle(style=style)]


class Italic(Function):
    """``[italic]`` toggles italic text; ``[italic][text]`` scopes it to *text*."""

    body_policy = BodyPolicy.OPTIONAL
    stateful = True

    body: SyntaxTree | None = None

    @classmethod
    def from_invocation(
        cls, header: FuncHeader, body: str | None, ctx: ParseContext
    ) -> Italic:
        return cls(body=optional(body, ctx))

    async def commands(self, ctx: LayoutContext) -> Commands:
        style = ctx.style.model_copy(update={"italic": not ctx.style.italic})
        if self.body is None:
            return [SetTextStyle(style=style)]

        nested = (await layout_tree(self.body, ctx.derive(style=style))).unwrap()
        return [SetTextStyle(style=style), *nested, SetTextStyle(style=ctx.style)]
