"""Tests for FuncResult."""

from __future__ import annotations

import pytest

from typeset.func.errors import FuncAbort, error
from typeset.func.result import FuncResult


class TestFuncResult:
    def test_success(self) -> None:
        result = FuncResult.success([1, 2])
        assert result.ok is True
        assert result.value == [1, 2]
        assert result.error is None
        assert result.unwrap() == [1, 2]

    def test_failure(self) -> None:
        result = FuncResult.failure(error("bad"))
        assert result.ok is False
        assert result.value is None
        assert result.error is not None
        assert result.error.message == "bad"

    def test_unwrap_failure_aborts(self) -> None:
        result = FuncResult.failure(error("bad"))
        with pytest.raises(FuncAbort) as info:
            result.unwrap()
        assert info.value.error.message == "bad"

    def test_success_with_empty_value(self) -> None:
        result = FuncResult.success([])
        assert result.ok is True
        assert result.unwrap() == []

    def test_frozen(self) -> None:
        result = FuncResult.success(1)
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
