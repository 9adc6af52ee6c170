"""Reference scanner: splits document source into tokens.

Invocations are kept raw: the scanner only finds the header text between
``[`` and ``]`` and, if a second bracket group follows immediately, the raw
body text.  Headers are parsed into :class:`~typeset.syntax.args.FuncHeader`
by :mod:`typeset.syntax.parser`; bodies are parsed recursively by the body
policies.

Syntax::

    Some text [bold] more text [box: pad=2pt][nested [italic] text]

    A blank line starts a new paragraph.  \\[ and \\] are literal brackets.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

_ESCAPABLE = frozenset("[]\\")


class ScanError(ValueError):
    """Raised on unbalanced brackets or a dangling escape."""

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} (at offset {offset})")


@dataclass(frozen=True)
class WordToken:
    text: str


@dataclass(frozen=True)
class SpaceToken:
    pass


@dataclass(frozen=True)
class ParbreakToken:
    pass


@dataclass(frozen=True)
class InvocationToken:
    """Raw header text plus the raw body, or ``None`` without a body."""

    header: str
    body: str | None
    offset: int


Token: TypeAlias = WordToken | SpaceToken | ParbreakToken | InvocationToken


def scan(src: str) -> Iterator[Token]:
    """Yield tokens for *src* in source order.

    Raises:
        ScanError: On an unclosed ``[`` group, a stray ``]`` or a trailing
            backslash.
    """
    i = 0
    n = len(src)
    word: list[str] = []

    def flush() -> Iterator[Token]:
        if word:
            yield WordToken("".join(word))
            word.clear()

    while i < n:
        ch = src[i]
        if ch == "\\":
            if i + 1 >= n or src[i + 1] not in _ESCAPABLE:
                raise ScanError("invalid escape", i)
            word.append(src[i + 1])
            i += 2
        elif ch.isspace():
            yield from flush()
            end = i
            while end < n and src[end].isspace():
                end += 1
            if src.count("\n", i, end) >= 2:
                yield ParbreakToken()
            else:
                yield SpaceToken()
            i = end
        elif ch == "[":
            yield from flush()
            start = i
            header_end = _group_end(src, i, quotes=True)
            header = src[i + 1 : header_end]
            body: str | None = None
            i = header_end + 1
            if i < n and src[i] == "[":
                body_end = _group_end(src, i)
                body = src[i + 1 : body_end]
                yield InvocationToken(header=header, body=body, offset=start)
                i = body_end + 1
            else:
                yield InvocationToken(header=header, body=None, offset=start)
        elif ch == "]":
            raise ScanError("unexpected closing bracket", i)
        else:
            word.append(ch)
            i += 1

    yield from flush()


def _group_end(src: str, start: int, *, quotes: bool = False) -> int:
    """Index of the ``]`` that closes the ``[`` at *start*.

    With *quotes*, brackets inside ``"..."`` string literals do not count.
    """
    depth = 0
    quoted = False
    i = start
    while i < len(src):
        ch = src[i]
        if ch == "\\":
            i += 2
            continue
        if quotes and ch == '"':
            quoted = not quoted
        elif not quoted:
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
                if depth == 0:
                    return i
        i += 1
    raise ScanError("unclosed bracket", start)
