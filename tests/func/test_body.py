"""Tests for the forbidden / optional / expected body policies."""

from __future__ import annotations

import pytest

from typeset.func.body import BodyPolicy, expected, forbidden, optional
from typeset.func.errors import ErrorCode, FuncAbort
from typeset.syntax.parser import ParseContext, parse
from typeset.syntax.tree import Space, SyntaxTree, Text


class TestForbidden:
    @pytest.mark.parametrize("body", ["x", "", "[bold]"])
    def test_any_body_fails(self, body: str) -> None:
        with pytest.raises(FuncAbort) as info:
            forbidden(body)
        assert info.value.error.message == "unexpected body"
        assert info.value.error.code == ErrorCode.UNEXPECTED_BODY

    def test_absent_body_proceeds(self) -> None:
        assert forbidden(None) is None


class TestOptional:
    def test_absent_body_yields_none(self, parse_ctx: ParseContext) -> None:
        assert optional(None, parse_ctx) is None

    def test_present_body_matches_direct_parse(self, parse_ctx: ParseContext) -> None:
        src = "some [bold] text"
        tree = optional(src, parse_ctx)
        assert tree == parse(src, parse_ctx).unwrap()

    def test_plain_body(self, parse_ctx: ParseContext) -> None:
        assert optional("a b", parse_ctx) == SyntaxTree([Text("a"), Space(), Text("b")])

    def test_nested_failure_propagates(self, parse_ctx: ParseContext) -> None:
        with pytest.raises(FuncAbort) as info:
            optional("[nosuch]", parse_ctx)
        assert info.value.error.code == ErrorCode.UNKNOWN_FUNCTION


class TestExpected:
    def test_absent_body_fails(self, parse_ctx: ParseContext) -> None:
        with pytest.raises(FuncAbort) as info:
            expected(None, parse_ctx)
        assert info.value.error.message == "unexpected body"
        assert info.value.error.code == ErrorCode.MISSING_BODY

    def test_present_body_matches_optional(self, parse_ctx: ParseContext) -> None:
        src = "hello [italic][world]"
        assert expected(src, parse_ctx) == optional(src, parse_ctx)


class TestBodyPolicy:
    def test_forbidden_admit(self, parse_ctx: ParseContext) -> None:
        assert BodyPolicy.FORBIDDEN.admit(None, parse_ctx) is None
        with pytest.raises(FuncAbort):
            BodyPolicy.FORBIDDEN.admit("x", parse_ctx)

    def test_optional_admit(self, parse_ctx: ParseContext) -> None:
        assert BodyPolicy.OPTIONAL.admit(None, parse_ctx) is None
        assert BodyPolicy.OPTIONAL.admit("x", parse_ctx) == SyntaxTree([Text("x")])

    def test_expected_admit(self, parse_ctx: ParseContext) -> None:
        assert BodyPolicy.EXPECTED.admit("x", parse_ctx) == SyntaxTree([Text("x")])
        with pytest.raises(FuncAbort):
            BodyPolicy.EXPECTED.admit(None, parse_ctx)
