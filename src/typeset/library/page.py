"""``[page: letter]`` / ``[page: width=10cm, margin=1cm]`` — page setup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeset.func.base import Function
from typeset.func.body import BodyPolicy, forbidden
from typeset.func.errors import bail
from typeset.layout.commands import Commands, SetPageStyle
from typeset.syntax.args import Ident, Size

if TYPE_CHECKING:
    from typeset.layout.context import LayoutContext
    from typeset.syntax.args import FuncHeader

# (width, height) in points
PAPER_SIZES: dict[str, tuple[float, float]] = {
    "a4": (595.28, 841.89),
    "a5": (419.53, 595.28),
    "letter": (612.0, 792.0),
    "legal": (612.0, 1008.0),
}


class Page(Function):
    body_policy = BodyPolicy.FORBIDDEN

    width: float | None = None
    height: float | None = None
    margin: float | None = None

    @classmethod
    def from_invocation(cls, header: FuncHeader, body: str | None) -> Page:
        forbidden(body)
        args = header.args
        width = height = None

        paper = args.take_pos_as(Ident, "paper name")
        if paper is not None:
            if paper.name not in PAPER_SIZES:
                bail(f"unknown paper: `{paper.name}`")
            width, height = PAPER_SIZES[paper.name]

        explicit_width = args.take_key_as("width", Size, "size")
        explicit_height = args.take_key_as("height", Size, "size")
        margin = args.take_key_as("margin", Size, "size")

        return cls(
            width=explicit_width.points if explicit_width else width,
            height=explicit_height.points if explicit_height else height,
            margin=margin.points if margin else None,
        )

    async def commands(self, ctx: LayoutContext) -> Commands:
        overrides = {
            key: value
            for key, value in (
                ("width", self.width),
                ("height", self.height),
                ("margin", self.margin),
            )
            if value is not None
        }
        return [SetPageStyle(page=ctx.document.page.model_copy(update=overrides))]
