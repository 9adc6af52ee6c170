"""DocumentService — drives parse and layout passes over a document.

This is the top-level driver of the function protocol: it builds the parse
context from settings and the standard scope, runs the parse pass, runs the
layout pass on an event loop, and turns any returned error into a
``ServiceResult`` failure for the CLI to render.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from typeset.config.logging import document_context
from typeset.layout.commands import COMMANDS_ADAPTER
from typeset.layout.context import LayoutContext
from typeset.layout.tree import layout_tree
from typeset.library import std
from typeset.services.result import ServiceError, ServiceResult
from typeset.syntax.parser import ParseContext, parse
from typeset.syntax.tree import FuncCall, Newline, Space, SyntaxTree, Text

if TYPE_CHECKING:
    from typeset.config.settings import TypesetSettings
    from typeset.func.errors import TypesetError
    from typeset.func.scope import Scope

logger = structlog.get_logger(__name__)

_TREE_FIELDS = frozenset({"body"})


def dump_tree(tree: SyntaxTree) -> list[dict[str, Any]]:
    """Plain-data rendering of a syntax tree (JSON-safe)."""
    nodes: list[dict[str, Any]] = []
    for node in tree:
        if isinstance(node, Text):
            nodes.append({"type": "text", "text": node.text})
        elif isinstance(node, Space):
            nodes.append({"type": "space"})
        elif isinstance(node, Newline):
            nodes.append({"type": "newline"})
        elif isinstance(node, FuncCall):
            value = node.value
            entry: dict[str, Any] = {
                "type": "function",
                "name": node.name,
                "kind": type(value).__name__,
                "args": value.model_dump(mode="json", exclude=_TREE_FIELDS),
            }
            body = getattr(value, "body", None)
            if isinstance(body, SyntaxTree):
                entry["body"] = dump_tree(body)
            nodes.append(entry)
    return nodes


class DocumentService:
    """Parse and lay out documents with a given scope and settings."""

    def __init__(self, settings: TypesetSettings, scope: Scope | None = None) -> None:
        self._settings = settings
        self._scope = scope if scope is not None else std()

    @property
    def scope(self) -> Scope:
        return self._scope

    def parse_context(self) -> ParseContext:
        return ParseContext(scope=self._scope, max_depth=self._settings.parse.max_depth)

    def layout_context(self) -> LayoutContext:
        return LayoutContext.for_document(self._settings.document_style())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def parse_source(self, src: str, *, name: str = "<input>") -> ServiceResult:
        """Parse *src* and return its syntax tree as data."""
        started = time.perf_counter()
        with document_context(name):
            result = parse(src, self.parse_context())
            if not result.ok:
                assert result.error is not None
                logger.info("parse failed", error=result.error.message)
                return self._failure("parse", result.error, name)

            tree: SyntaxTree = result.value
            logger.debug("parsed", nodes=len(tree))
            return ServiceResult(
                ok=True,
                op="parse",
                data={"nodes": dump_tree(tree), "count": len(tree)},
                meta=self._meta(name, started),
            )

    def layout_source(self, src: str, *, name: str = "<input>") -> ServiceResult:
        """Parse *src*, lay it out, and return the resulting Commands as data."""
        started = time.perf_counter()
        with document_context(name):
            parsed = parse(src, self.parse_context())
            if not parsed.ok:
                assert parsed.error is not None
                logger.info("parse failed", error=parsed.error.message)
                return self._failure("layout", parsed.error, name)

            laid_out = asyncio.run(layout_tree(parsed.value, self.layout_context()))
            if not laid_out.ok:
                assert laid_out.error is not None
                logger.info("layout failed", error=laid_out.error.message)
                return self._failure("layout", laid_out.error, name)

            commands = laid_out.value or []
            logger.debug("laid out", commands=len(commands))
            return ServiceResult(
                ok=True,
                op="layout",
                data={
                    "commands": COMMANDS_ADAPTER.dump_python(commands, mode="json"),
                    "count": len(commands),
                },
                meta=self._meta(name, started),
            )

    def parse_file(self, path: Path) -> ServiceResult:
        return self._with_file("parse", path, self.parse_source)

    def layout_file(self, path: Path) -> ServiceResult:
        return self._with_file("layout", path, self.layout_source)

    def list_functions(self) -> ServiceResult:
        """Describe every registered command kind."""
        items = [
            {
                "name": entry.name,
                "kind": entry.kind.__name__,
                "body": entry.kind.body_policy.value,
                "layout": entry.kind.supports_layout(),
                "meta": _dump_meta(entry.meta),
            }
            for entry in self._scope.entries()
        ]
        return ServiceResult(ok=True, op="functions", data={"items": items, "count": len(items)})

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _with_file(
        self, op: str, path: Path, run: Callable[..., ServiceResult]
    ) -> ServiceResult:
        try:
            src = path.read_text(encoding="utf-8")
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="io", message=f"Cannot read {path}: {exc.strerror}"),
            )
        except UnicodeDecodeError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="encoding",
                    message=f"Cannot decode {path} as UTF-8: {exc.reason}",
                    detail={"document": str(path), "offset": exc.start},
                ),
            )
        return run(src, name=str(path))

    @staticmethod
    def _failure(op: str, err: TypesetError, name: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError.from_typeset(err, document=name),
        )

    @staticmethod
    def _meta(name: str, started: float) -> dict[str, Any]:
        return {
            "document": name,
            "duration_ms": round((time.perf_counter() - started) * 1000, 3),
        }


def _dump_meta(meta: Any) -> Any:
    if meta is None:
        return None
    if hasattr(meta, "model_dump"):
        return meta.model_dump(mode="json")
    return repr(meta)
