"""Layout directives produced by command values.

A layout call returns an ordered list of these; the layout engine consumes
them immediately.  Every directive is a frozen pydantic model tagged by
``kind`` so a whole list serializes through :data:`COMMANDS_ADAPTER`.
"""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field, TypeAdapter

from typeset.layout.context import Alignment, Axis, PageStyle, TextStyle


class AddText(BaseModel):
    """Place a word using the current text style."""

    model_config = {"frozen": True}

    kind: Literal["add_text"] = "add_text"
    text: str


class AddSpace(BaseModel):
    """Inter-word space; collapsible at line ends."""

    model_config = {"frozen": True}

    kind: Literal["add_space"] = "add_space"


class AddSpacing(BaseModel):
    """Fixed spacing along one axis, in points."""

    model_config = {"frozen": True}

    kind: Literal["add_spacing"] = "add_spacing"
    axis: Axis
    points: float


class BreakLine(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["break_line"] = "break_line"


class BreakParagraph(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["break_paragraph"] = "break_paragraph"


class BreakPage(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["break_page"] = "break_page"


class SetTextStyle(BaseModel):
    """Switch the text style for everything that follows."""

    model_config = {"frozen": True}

    kind: Literal["set_text_style"] = "set_text_style"
    style: TextStyle


class SetAlignment(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["set_alignment"] = "set_alignment"
    alignment: Alignment


class SetPageStyle(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["set_page_style"] = "set_page_style"
    page: PageStyle


Command: TypeAlias = Annotated[
    AddText
    | AddSpace
    | AddSpacing
    | BreakLine
    | BreakParagraph
    | BreakPage
    | SetTextStyle
    | SetAlignment
    | SetPageStyle,
    Field(discriminator="kind"),
]

Commands: TypeAlias = list[Command]

COMMANDS_ADAPTER: TypeAdapter[list[Command]] = TypeAdapter(list[Command])
