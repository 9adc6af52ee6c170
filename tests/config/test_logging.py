"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from typeset.config.logging import configure_logging, document_context


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    typeset_level = logging.getLogger("typeset").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("typeset").setLevel(typeset_level)


def _lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("typeset").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("typeset").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("typeset.test").warning("json test", answer=42)
        (record,) = _lines(stream)
        assert record["event"] == "json test"
        assert record["answer"] == 42
        assert record["level"] == "warning"
        assert record["logger"] == "typeset.test"
        assert "timestamp" in record

    def test_stdlib_logger_is_structured(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("typeset.func.base").debug("plain %s", "message")
        (record,) = _lines(stream)
        assert record["event"] == "plain message"
        assert record["level"] == "debug"

    def test_debug_hidden_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("typeset.func.base").debug("hidden")
        assert stream.getvalue() == ""


class TestDocumentContext:
    def test_binds_document(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        with document_context("doc.tps"):
            structlog.get_logger("typeset.test").info("inside")
        structlog.get_logger("typeset.test").info("outside")
        inside, outside = _lines(stream)
        assert inside["document"] == "doc.tps"
        assert "document" not in outside
