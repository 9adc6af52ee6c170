"""Layout of a whole syntax tree.

Every node is laid out as its own task and the Commands are concatenated in
tree order.  Text style and alignment run through the tree: a node whose
value :meth:`~typeset.func.base.Function.affects_state` is awaited before
its later siblings start, and those siblings get a context derived from the
``SetTextStyle``/``SetAlignment`` directives it emitted.  All other siblings
run concurrently.

Failures are reported in tree order: the first failing node, not the first
to finish, wins.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from typeset.func.result import FuncResult
from typeset.layout.commands import (
    AddSpace,
    AddText,
    BreakParagraph,
    Commands,
    SetAlignment,
    SetTextStyle,
)
from typeset.syntax.tree import FuncCall, Newline, Node, Space, Text

if TYPE_CHECKING:
    from typeset.layout.context import LayoutContext
    from typeset.syntax.tree import SyntaxTree

logger = logging.getLogger(__name__)


async def layout_node(node: Node, ctx: LayoutContext) -> FuncResult[Commands]:
    """Commands for a single node."""
    if isinstance(node, Text):
        return FuncResult.success([AddText(text=node.text)])
    if isinstance(node, Space):
        return FuncResult.success([AddSpace()])
    if isinstance(node, Newline):
        return FuncResult.success([BreakParagraph()])
    if isinstance(node, FuncCall):
        if not node.value.supports_layout():
            logger.debug("Function %s has no layout; skipping", node.name)
        return await node.value.layout(ctx)
    msg = f"Unknown syntax node: {node!r}"
    raise TypeError(msg)


def advance(ctx: LayoutContext, commands: Commands) -> LayoutContext:
    """Context in effect after *commands* have been applied under *ctx*."""
    for command in commands:
        if isinstance(command, SetTextStyle):
            ctx = ctx.derive(style=command.style)
        elif isinstance(command, SetAlignment):
            ctx = ctx.derive(alignment=command.alignment)
    return ctx


async def layout_tree(tree: SyntaxTree, ctx: LayoutContext) -> FuncResult[Commands]:
    """Lay out every node of *tree*, starting from *ctx*."""
    tasks: list[asyncio.Task[FuncResult[Commands]]] = []
    for node in tree:
        task = asyncio.create_task(layout_node(node, ctx))
        tasks.append(task)
        if isinstance(node, FuncCall) and node.value.affects_state():
            result = await task
            if not result.ok:
                break
            ctx = advance(ctx, result.value or [])

    results = await asyncio.gather(*tasks)

    commands: Commands = []
    for result in results:
        if not result.ok:
            return result
        commands.extend(result.value or ())
    return FuncResult.success(commands)
