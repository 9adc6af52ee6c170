"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, typeset.toml only contains
overrides.  Lengths are in points.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from typeset.layout.context import Alignment
from typeset.syntax.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT


class PageConfig(BaseModel):
    """[page] section."""

    model_config = {"frozen": True}

    width: float = Field(default=595.28, gt=0)
    height: float = Field(default=841.89, gt=0)
    margin: float = Field(default=72.0, ge=0)


class TextConfig(BaseModel):
    """[text] section."""

    model_config = {"frozen": True}

    font_size: float = Field(default=11.0, gt=0)
    line_spacing: float = Field(default=1.2, gt=0)
    alignment: Alignment = Alignment.LEFT


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0, le=MAX_DEPTH_LIMIT)


class TypesetConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    page: PageConfig = Field(default_factory=PageConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
