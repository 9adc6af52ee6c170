"""``[n]`` and ``[pagebreak]``: argument-free breaks."""

from __future__ import annotations

from typeset.func.base import Function
from typeset.layout.commands import BreakLine, BreakPage, Commands


class LineBreak(Function):
    parse_default = True

    async def commands(self) -> Commands:
        return [BreakLine()]


class PageBreak(Function):
    parse_default = True

    async def commands(self) -> Commands:
        return [BreakPage()]
