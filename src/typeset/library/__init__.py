"""Built-in command kinds and the standard scope."""

from __future__ import annotations

from typeset.func.scope import Scope
from typeset.layout.context import Axis
from typeset.library.align import Align
from typeset.library.boxed import Box
from typeset.library.breaks import LineBreak, PageBreak
from typeset.library.comment import Comment
from typeset.library.page import Page
from typeset.library.spacing import Spacing, SpacingMeta
from typeset.library.style import Bold, Italic

__all__ = [
    "Align",
    "Bold",
    "Box",
    "Comment",
    "Italic",
    "LineBreak",
    "Page",
    "PageBreak",
    "Spacing",
    "SpacingMeta",
    "std",
]


def std() -> Scope:
    """A fresh scope holding every built-in command kind."""
    scope = Scope()
    scope.add("bold", Bold)
    scope.add("italic", Italic)
    scope.add("box", Box)
    scope.add("align", Align)
    scope.add("h", Spacing, SpacingMeta(axis=Axis.HORIZONTAL))
    scope.add("v", Spacing, SpacingMeta(axis=Axis.VERTICAL))
    scope.add("n", LineBreak)
    scope.add("pagebreak", PageBreak)
    scope.add("page", Page)
    scope.add("comment", Comment)
    return scope
