"""Tests for Scope registration and dispatch."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from typeset.func.errors import ErrorCode
from typeset.func.scope import Scope
from typeset.layout.context import Axis
from typeset.library import Bold, Box, Spacing, SpacingMeta, std
from typeset.syntax.args import FuncArgs, FuncHeader, Size
from typeset.syntax.parser import ParseContext


class TestRegistration:
    def test_add_and_get(self) -> None:
        scope = Scope()
        scope.add("bold", Bold)
        entry = scope.get("bold")
        assert entry is not None
        assert entry.kind is Bold
        assert entry.meta is None
        assert "bold" in scope
        assert len(scope) == 1

    def test_default_metadata(self) -> None:
        scope = Scope()
        scope.add("space", Spacing)
        entry = scope.get("space")
        assert entry is not None
        assert entry.meta == SpacingMeta()

    def test_duplicate_name_rejected(self) -> None:
        scope = Scope()
        scope.add("bold", Bold)
        with pytest.raises(ValueError, match="already registered"):
            scope.add("bold", Box)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Scope().add("  ", Bold)

    def test_non_function_rejected(self) -> None:
        class NotAFunction(BaseModel):
            pass

        with pytest.raises(TypeError, match="Function subclass"):
            Scope().add("x", NotAFunction)  # type: ignore[arg-type]

    def test_metadata_type_checked(self) -> None:
        with pytest.raises(TypeError, match="SpacingMeta"):
            Scope().add("h", Spacing, Axis.HORIZONTAL)

    def test_unit_metadata_rejects_values(self) -> None:
        with pytest.raises(TypeError, match="takes no metadata"):
            Scope().add("bold", Bold, "loud")

    def test_names_sorted(self) -> None:
        scope = Scope()
        scope.add("v", Spacing, SpacingMeta(axis=Axis.VERTICAL))
        scope.add("bold", Bold)
        assert scope.names() == ["bold", "v"]
        assert [e.name for e in scope.entries()] == ["bold", "v"]


class TestDispatch:
    def test_unknown_function(self) -> None:
        scope = Scope()
        result = scope.parse(FuncHeader(name="nope"), None, ParseContext(scope=scope))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.UNKNOWN_FUNCTION
        assert result.error.message == "unknown function: `nope`"

    def test_same_kind_different_metadata(self) -> None:
        scope = std()
        ctx = ParseContext(scope=scope)
        h = scope.parse(FuncHeader("h", FuncArgs([Size(points=5.0)])), None, ctx).unwrap()
        v = scope.parse(FuncHeader("v", FuncArgs([Size(points=5.0)])), None, ctx).unwrap()
        assert h == Spacing(axis=Axis.HORIZONTAL, points=5.0)
        assert v == Spacing(axis=Axis.VERTICAL, points=5.0)
