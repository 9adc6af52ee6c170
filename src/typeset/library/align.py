"""``[align: center]`` and ``[align: right][scoped content]``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeset.func.base import Function
from typeset.func.body import BodyPolicy, optional
from typeset.func.errors import bail
from typeset.layout.commands import Commands, SetAlignment
from typeset.layout.context import Alignment
from typeset.layout.tree import layout_tree
from typeset.syntax.args import Ident
from typeset.syntax.tree import SyntaxTree

if TYPE_CHECKING:
    from typeset.layout.context import LayoutContext
    from typeset.syntax.args import FuncHeader
    from typeset.syntax.parser import ParseContext


def _alignment(ident: Ident | None) -> Alignment:
    if ident is None:
        bail("missing argument: alignment")
    try:
        return Alignment(ident.name)
    except ValueError:
        choices = ", ".join(a.value for a in Alignment)
        bail(f"invalid alignment: `{ident.name}` (expected one of {choices})")


class Align(Function):
    body_policy = BodyPolicy.OPTIONAL
    stateful = True

    alignment: Alignment
    body: SyntaxTree | None = None

    @classmethod
    def from_invocation(
        cls, header: FuncHeader, body: str | None, ctx: ParseContext
    ) -> Align:
        alignment = _alignment(header.args.take_pos_as(Ident, "alignment"))
        return cls(alignment=alignment, body=optional(body, ctx))

    async def commands(self, ctx: LayoutContext) -> Commands:
        if self.body is None:
            return [SetAlignment(alignment=self.alignment)]

        nested = (await layout_tree(self.body, ctx.derive(alignment=self.alignment))).unwrap()
        return [
            SetAlignment(alignment=self.alignment),
            *nested,
            SetAlignment(alignment=ctx.alignment),
        ]
