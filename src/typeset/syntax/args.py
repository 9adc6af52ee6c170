"""Invocation headers and their argument lists.

A :class:`FuncHeader` is handed to exactly one parse call.  The parse hook
consumes arguments with the ``take_*`` methods; whatever remains afterwards
fails the invocation with ``"unexpected arguments"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from typeset.func.errors import bail

_SIZE_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)(pt|mm|cm|in)$")

# Points per unit.
_UNIT_SCALE: dict[str, float] = {
    "pt": 1.0,
    "mm": 2.83465,
    "cm": 28.3465,
    "in": 72.0,
}


@dataclass(frozen=True)
class Ident:
    """A bare identifier argument such as ``center`` in ``[align: center]``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Size:
    """A length argument, normalized to points."""

    points: float
    unit: str = "pt"

    @classmethod
    def parse(cls, text: str) -> Size | None:
        """Parse ``12pt``, ``2.5cm``... Returns ``None`` for anything else.

        Examples:
            >>> Size.parse("1in").points
            72.0
            >>> Size.parse("wide") is None
            True
        """
        match = _SIZE_PATTERN.match(text)
        if match is None:
            return None
        value, unit = match.groups()
        return cls(points=float(value) * _UNIT_SCALE[unit], unit=unit)

    def __str__(self) -> str:
        return f"{self.points / _UNIT_SCALE[self.unit]:g}{self.unit}"


Expr: TypeAlias = str | float | bool | Ident | Size


def describe(value: Expr) -> str:
    """Human-readable rendering of an argument value for error messages."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@dataclass
class FuncArgs:
    """Positional and keyword arguments of one invocation, consumed in place."""

    positional: list[Expr] = field(default_factory=list)
    keyword: dict[str, Expr] = field(default_factory=dict)

    def take_pos(self) -> Expr | None:
        """Remove and return the first positional argument, if any."""
        if not self.positional:
            return None
        return self.positional.pop(0)

    def take_pos_as(self, kind: type[Any] | tuple[type[Any], ...], what: str) -> Any:
        """Remove the first positional argument, requiring it to be of *kind*.

        Returns ``None`` if there is no positional argument left.  A value of
        the wrong type aborts the running hook.
        """
        if not self.positional:
            return None
        return self._check(self.positional.pop(0), kind, what)

    def take_key(self, name: str) -> Expr | None:
        """Remove and return the keyword argument *name*, if present."""
        return self.keyword.pop(name, None)

    def take_key_as(
        self, name: str, kind: type[Any] | tuple[type[Any], ...], what: str
    ) -> Any:
        """Remove the keyword argument *name*, requiring it to be of *kind*."""
        if name not in self.keyword:
            return None
        return self._check(self.keyword.pop(name), kind, what)

    def take_all_pos(self) -> list[Expr]:
        """Remove and return every remaining positional argument."""
        taken, self.positional = self.positional, []
        return taken

    def is_empty(self) -> bool:
        return not self.positional and not self.keyword

    def __len__(self) -> int:
        return len(self.positional) + len(self.keyword)

    def __iter__(self) -> Iterator[Expr]:
        yield from self.positional
        yield from self.keyword.values()

    def leftovers(self) -> dict[str, list[str]]:
        """Describe unconsumed arguments for diagnostics."""
        return {
            "positional": [describe(v) for v in self.positional],
            "keyword": [f"{k}={describe(v)}" for k, v in self.keyword.items()],
        }

    @staticmethod
    def _check(value: Expr, kind: type[Any] | tuple[type[Any], ...], what: str) -> Any:
        if not isinstance(value, kind):
            bail(f"expected {what}, found {describe(value)}")
        return value


@dataclass
class FuncHeader:
    """Name and arguments of one invocation."""

    name: str
    args: FuncArgs = field(default_factory=FuncArgs)
