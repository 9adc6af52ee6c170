"""Syntax tree produced by the document parser."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from typeset.func.base import Function


@dataclass(frozen=True)
class Text:
    """A run of non-whitespace text."""

    text: str


@dataclass(frozen=True)
class Space:
    """Whitespace between words."""


@dataclass(frozen=True)
class Newline:
    """A paragraph break (blank line)."""


@dataclass(frozen=True)
class FuncCall:
    """A parsed invocation: the registered name and its command value."""

    name: str
    value: Function


Node: TypeAlias = Text | Space | Newline | FuncCall


class SyntaxTree:
    """An immutable, ordered sequence of nodes."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Sequence[Node] = ()) -> None:
        self._nodes: tuple[Node, ...] = tuple(nodes)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyntaxTree):
            return NotImplemented
        return self._nodes == other._nodes

    def __hash__(self) -> int:
        return hash(self._nodes)

    def __repr__(self) -> str:
        return f"SyntaxTree({list(self._nodes)!r})"
