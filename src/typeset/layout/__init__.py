"""Layout layer — Commands, layout context and the tree layouter."""

from typeset.layout.commands import (
    COMMANDS_ADAPTER,
    AddSpace,
    AddSpacing,
    AddText,
    BreakLine,
    BreakPage,
    BreakParagraph,
    Command,
    Commands,
    SetAlignment,
    SetPageStyle,
    SetTextStyle,
)
from typeset.layout.context import (
    Alignment,
    Axis,
    DocumentStyle,
    LayoutContext,
    PageStyle,
    TextStyle,
)
from typeset.layout.tree import advance, layout_node, layout_tree

__all__ = [
    "COMMANDS_ADAPTER",
    "AddSpace",
    "AddSpacing",
    "AddText",
    "Alignment",
    "Axis",
    "BreakLine",
    "BreakPage",
    "BreakParagraph",
    "Command",
    "Commands",
    "DocumentStyle",
    "LayoutContext",
    "PageStyle",
    "SetAlignment",
    "SetPageStyle",
    "SetTextStyle",
    "TextStyle",
    "advance",
    "layout_node",
    "layout_tree",
]
