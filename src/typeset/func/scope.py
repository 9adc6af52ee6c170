"""Scope — registry of command kinds available to the parser.

Each registration binds a name to a :class:`Function` subclass together
with the static metadata value threaded into every parse call of that
name.  The same kind may be registered under several names with different
metadata (``h`` and ``v`` share one spacing kind, told apart by an axis).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from types import NoneType
from typing import TYPE_CHECKING, Any

from typeset.func.base import Function
from typeset.func.errors import ErrorCode, error
from typeset.func.result import FuncResult

if TYPE_CHECKING:
    from typeset.syntax.args import FuncHeader
    from typeset.syntax.parser import ParseContext

logger = logging.getLogger(__name__)

_UNSET: Any = object()


@dataclass(frozen=True)
class FuncEntry:
    """One registration: name, command kind and its metadata."""

    name: str
    kind: type[Function]
    meta: Any

    def parse(
        self, header: FuncHeader, body: str | None, ctx: ParseContext
    ) -> FuncResult[Function]:
        return self.kind.parse(header, body, ctx, self.meta)


class Scope:
    """Name to command kind mapping consulted while parsing."""

    def __init__(self) -> None:
        self._entries: dict[str, FuncEntry] = {}

    def add(self, name: str, kind: type[Function], meta: Any = _UNSET) -> None:
        """Register *kind* under *name*.

        *meta* defaults to the kind's default metadata and must be an
        instance of its ``meta_type``.

        Raises:
            TypeError: If *kind* is not a Function subclass or *meta* has
                the wrong type.
            ValueError: If *name* is empty or already registered.
        """
        normalized = name.strip()
        if not normalized:
            msg = "Function name must not be empty"
            raise ValueError(msg)

        if not (isinstance(kind, type) and issubclass(kind, Function)):
            msg = f"Function {normalized!r} must be registered with a Function subclass"
            raise TypeError(msg)

        if normalized in self._entries:
            msg = f"Function {normalized!r} is already registered"
            raise ValueError(msg)

        if meta is _UNSET:
            meta = kind.default_meta()
        elif kind.meta_type is NoneType:
            if meta is not None:
                msg = f"Function {normalized!r} takes no metadata, got {meta!r}"
                raise TypeError(msg)
        elif not isinstance(meta, kind.meta_type):
            msg = (
                f"Function {normalized!r} expects metadata of type "
                f"{kind.meta_type.__name__}, got {type(meta).__name__}"
            )
            raise TypeError(msg)

        self._entries[normalized] = FuncEntry(name=normalized, kind=kind, meta=meta)
        logger.debug("Registered function %s -> %s", normalized, kind.__name__)

    def get(self, name: str) -> FuncEntry | None:
        return self._entries.get(name)

    def parse(
        self, header: FuncHeader, body: str | None, ctx: ParseContext
    ) -> FuncResult[Function]:
        """Dispatch one invocation to the kind registered under its name."""
        entry = self._entries.get(header.name)
        if entry is None:
            return FuncResult.failure(
                error(
                    f"unknown function: `{header.name}`",
                    code=ErrorCode.UNKNOWN_FUNCTION,
                )
            )
        return entry.parse(header, body, ctx)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def entries(self) -> Iterator[FuncEntry]:
        for name in self.names():
            yield self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
