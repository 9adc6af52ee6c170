"""``[h: 12pt]`` and ``[v: 1cm]`` — fixed spacing along one axis.

Both names share one command kind; the axis comes from the metadata each
name is registered with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from typeset.func.base import Function
from typeset.func.body import BodyPolicy, forbidden
from typeset.func.errors import bail
from typeset.layout.commands import AddSpacing, Commands
from typeset.layout.context import Axis
from typeset.syntax.args import Size

if TYPE_CHECKING:
    from typeset.syntax.args import FuncHeader
    from typeset.syntax.parser import ParseContext


class SpacingMeta(BaseModel):
    """Registration metadata: which axis the spacing runs along."""

    model_config = {"frozen": True}

    axis: Axis = Axis.HORIZONTAL


class Spacing(Function):
    meta_type = SpacingMeta
    body_policy = BodyPolicy.FORBIDDEN

    axis: Axis
    points: float

    @classmethod
    def from_invocation(
        cls,
        header: FuncHeader,
        body: str | None,
        ctx: ParseContext,
        meta: SpacingMeta,
    ) -> Spacing:
        forbidden(body)
        value: Any = header.args.take_pos_as((Size, float), "size")
        if value is None:
            bail(f"missing argument: size (in `{header.name}`)")
        # bare numbers are points
        points = value.points if isinstance(value, Size) else value
        return cls(axis=meta.axis, points=points)

    async def commands(self) -> Commands:
        return [AddSpacing(axis=self.axis, points=self.points)]
