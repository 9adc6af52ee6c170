"""Shared pytest fixtures for typeset tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from typeset.config.settings import TypesetSettings
from typeset.func.scope import Scope
from typeset.layout.context import LayoutContext
from typeset.library import std
from typeset.syntax.parser import ParseContext


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def scope() -> Scope:
    """A fresh standard scope."""
    return std()


@pytest.fixture
def parse_ctx(scope: Scope) -> ParseContext:
    return ParseContext(scope=scope)


@pytest.fixture
def layout_ctx() -> LayoutContext:
    return LayoutContext.for_document()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TypesetSettings:
    """Settings with no TOML file and no TYPESET_* env overrides."""
    monkeypatch.delenv("TYPESET_CONFIG", raising=False)
    return TypesetSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp directory (no typeset.toml above it)."""
    monkeypatch.delenv("TYPESET_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
