"""Tests for the Function base: generated parse/layout wrappers."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from pydantic import BaseModel

from typeset.func.base import Function
from typeset.func.body import forbidden
from typeset.func.errors import ErrorCode, bail, error
from typeset.func.result import FuncResult
from typeset.layout.commands import AddText, BreakLine
from typeset.layout.context import LayoutContext
from typeset.syntax.args import FuncArgs, FuncHeader, Ident
from typeset.syntax.parser import ParseContext


def _header(name: str = "f", *positional: Any, **keyword: Any) -> FuncHeader:
    return FuncHeader(name=name, args=FuncArgs(list(positional), dict(keyword)))


class _Marker(Function):
    """Zero-parameter hook: sees nothing."""

    @classmethod
    def from_invocation(cls) -> _Marker:
        return cls()


class _Label(Function):
    """One-parameter hook: takes a single positional identifier."""

    label: str = ""

    @classmethod
    def from_invocation(cls, header: FuncHeader) -> _Label:
        ident = header.args.take_pos_as(Ident, "label")
        if ident is None:
            bail("missing argument: label")
        return cls(label=ident.name)

    async def commands(self) -> list[Any]:
        return [AddText(text=self.label)]


class _Unit(BaseModel):
    model_config = {"frozen": True}

    factor: int = 1


class _Scaled(Function):
    """Four-parameter hook reading its metadata."""

    meta_type = _Unit

    factor: int

    @classmethod
    def from_invocation(
        cls, header: FuncHeader, body: str | None, ctx: ParseContext, meta: _Unit
    ) -> _Scaled:
        forbidden(body)
        return cls(factor=meta.factor)


class _Defaulted(Function):
    parse_default = True

    async def commands(self, ctx: LayoutContext) -> list[Any]:
        return [BreakLine()]


class _Returning(Function):
    """Hook returning a FuncResult instead of a value."""

    @classmethod
    def from_invocation(cls, header: FuncHeader) -> FuncResult[Function]:
        if header.args.take_key("fail") is not None:
            return FuncResult.failure(error("asked to fail"))
        return FuncResult.success(cls())

    async def commands(self, ctx: LayoutContext) -> FuncResult[list[Any]]:
        return FuncResult.failure(error("cannot lay out", code=ErrorCode.LAYOUT))


class TestParseWrapper:
    def test_zero_arity_hook(self, parse_ctx: ParseContext) -> None:
        result = _Marker.parse(_header(), None, parse_ctx)
        assert result.ok
        assert isinstance(result.value, _Marker)

    def test_leftover_positional_fails(self, parse_ctx: ParseContext) -> None:
        result = _Marker.parse(_header("f", 1.0), None, parse_ctx)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "unexpected arguments"
        assert result.error.detail["positional"] == ["1"]

    def test_leftover_keyword_fails(self, parse_ctx: ParseContext) -> None:
        result = _Label.parse(_header("f", Ident("a"), size=2.0), None, parse_ctx)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.UNEXPECTED_ARGUMENTS
        assert result.error.detail["keyword"] == ["size=2"]

    @pytest.mark.parametrize("extra", [[Ident("b")], [Ident("b"), "c"], [1.0, True]])
    def test_any_leftover_fails(self, parse_ctx: ParseContext, extra: list[Any]) -> None:
        result = _Label.parse(_header("f", Ident("a"), *extra), None, parse_ctx)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "unexpected arguments"

    def test_consumes_header_in_place(self, parse_ctx: ParseContext) -> None:
        header = _header("f", Ident("a"))
        result = _Label.parse(header, None, parse_ctx)
        assert result.ok
        assert header.args.is_empty()

    def test_bail_becomes_failure(self, parse_ctx: ParseContext) -> None:
        result = _Label.parse(_header(), None, parse_ctx)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "missing argument: label"

    def test_wrong_argument_type(self, parse_ctx: ParseContext) -> None:
        result = _Label.parse(_header("f", "quoted"), None, parse_ctx)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == 'expected label, found "quoted"'

    def test_metadata_is_threaded(self, parse_ctx: ParseContext) -> None:
        result = _Scaled.parse(_header(), None, parse_ctx, _Unit(factor=3))
        assert result.unwrap() == _Scaled(factor=3)

    def test_metadata_defaults(self, parse_ctx: ParseContext) -> None:
        result = _Scaled.parse(_header(), None, parse_ctx)
        assert result.unwrap() == _Scaled(factor=1)

    def test_hook_may_return_result(self, parse_ctx: ParseContext) -> None:
        assert _Returning.parse(_header(), None, parse_ctx).ok
        failed = _Returning.parse(_header(fail=True), None, parse_ctx)
        assert not failed.ok
        assert failed.error is not None
        assert failed.error.message == "asked to fail"


class TestDefaultParse:
    @pytest.mark.parametrize("body", [None, "", "anything [at] all"])
    def test_always_succeeds_ignoring_body(
        self, parse_ctx: ParseContext, body: str | None
    ) -> None:
        result = _Defaulted.parse(_header(), body, parse_ctx)
        assert result.ok
        assert result.value == _Defaulted()

    def test_arguments_still_checked(self, parse_ctx: ParseContext) -> None:
        result = _Defaulted.parse(_header("f", Ident("x")), None, parse_ctx)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "unexpected arguments"


class TestLayoutWrapper:
    def test_shorthand_without_context(self, layout_ctx: LayoutContext) -> None:
        result = asyncio.run(_Label(label="x").layout(layout_ctx))
        assert result.unwrap() == [AddText(text="x")]

    def test_full_form(self, layout_ctx: LayoutContext) -> None:
        result = asyncio.run(_Defaulted().layout(layout_ctx))
        assert result.unwrap() == [BreakLine()]

    def test_without_layout_hook(self, layout_ctx: LayoutContext) -> None:
        assert _Marker.supports_layout() is False
        result = asyncio.run(_Marker().layout(layout_ctx))
        assert result.ok
        assert result.value == []

    def test_returned_failure(self, layout_ctx: LayoutContext) -> None:
        result = asyncio.run(_Returning().layout(layout_ctx))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == ErrorCode.LAYOUT

    def test_bail_in_layout(self, layout_ctx: LayoutContext) -> None:
        class _Failing(Function):
            parse_default = True

            async def commands(self) -> list[Any]:
                bail("no room")

        result = asyncio.run(_Failing().layout(layout_ctx))
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "no room"


class TestCommandValues:
    def test_values_are_immutable(self) -> None:
        value = _Label(label="a")
        with pytest.raises(Exception):
            value.label = "b"  # type: ignore[misc]


class TestClassCreation:
    def test_missing_parse_hook(self) -> None:
        with pytest.raises(TypeError, match="must define from_invocation"):

            class _Nothing(Function):
                pass

    def test_both_parse_forms(self) -> None:
        with pytest.raises(TypeError, match="both parse_default"):

            class _Both(Function):
                parse_default = True

                @classmethod
                def from_invocation(cls) -> Any:
                    return cls()

    def test_too_many_parse_params(self) -> None:
        with pytest.raises(TypeError, match="at most 4"):

            class _Greedy(Function):
                @classmethod
                def from_invocation(cls, a: Any, b: Any, c: Any, d: Any, e: Any) -> Any:
                    return cls()

    def test_sync_layout_hook_rejected(self) -> None:
        with pytest.raises(TypeError, match="coroutine"):

            class _Blocking(Function):
                parse_default = True

                def commands(self, ctx: Any) -> list[Any]:
                    return []
