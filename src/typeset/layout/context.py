"""Layout context shared by all layout calls of one pass.

The context carries two lifetimes that must not be mixed up:

- ``document``: document-wide settings, fixed for the whole pass.
- ``style`` and ``alignment``: node-local state; a command kind that lays
  out nested content under different local state derives a child context
  with :meth:`LayoutContext.derive` instead of touching the shared one.

The context is frozen: concurrent layout calls only ever read it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from pydantic import BaseModel, Field


class Axis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class TextStyle(BaseModel):
    """Font state applied to placed text."""

    model_config = {"frozen": True}

    bold: bool = False
    italic: bool = False
    font_size: float = 11.0
    line_spacing: float = 1.2


class PageStyle(BaseModel):
    """Page dimensions and margins, in points (A4 by default)."""

    model_config = {"frozen": True}

    width: float = 595.28
    height: float = 841.89
    margin: float = 72.0


class DocumentStyle(BaseModel):
    """Document-wide defaults a layout pass starts from."""

    model_config = {"frozen": True}

    page: PageStyle = Field(default_factory=PageStyle)
    text: TextStyle = Field(default_factory=TextStyle)
    alignment: Alignment = Alignment.LEFT


@dataclass(frozen=True)
class LayoutContext:
    """State visible to one layout call.

    Attributes:
        document: Document-wide style, shared by every call of the pass.
        style: Text style in effect at this node.
        alignment: Alignment in effect at this node.
    """

    document: DocumentStyle
    style: TextStyle
    alignment: Alignment

    @classmethod
    def for_document(cls, document: DocumentStyle | None = None) -> LayoutContext:
        """Root context of a layout pass."""
        document = document or DocumentStyle()
        return cls(document=document, style=document.text, alignment=document.alignment)

    def derive(
        self,
        *,
        style: TextStyle | None = None,
        alignment: Alignment | None = None,
    ) -> LayoutContext:
        """Child context with node-local state replaced; ``document`` is kept."""
        return replace(
            self,
            style=style if style is not None else self.style,
            alignment=alignment if alignment is not None else self.alignment,
        )
