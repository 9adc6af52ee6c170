"""Reference document parser.

Turns source text into a :class:`SyntaxTree`, dispatching every invocation
to the command kind registered under its name in the context's scope.
Parsing is synchronous and runs invocations strictly in source order; the
first failing invocation fails the whole parse.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from typeset.func.errors import ErrorCode, error
from typeset.func.result import FuncResult
from typeset.syntax.args import Expr, FuncArgs, FuncHeader, Ident, Size
from typeset.syntax.scanner import (
    InvocationToken,
    ParbreakToken,
    ScanError,
    SpaceToken,
    WordToken,
    scan,
)
from typeset.syntax.tree import FuncCall, Newline, Node, Space, SyntaxTree, Text

if TYPE_CHECKING:
    from typeset.func.scope import Scope

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")
_NUMBER_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")
_ESCAPE_PATTERN = re.compile(r"\\(.)", re.DOTALL)

DEFAULT_MAX_DEPTH = 32
# Each body level costs several interpreter frames; deeper limits would hit
# the recursion limit before the configured depth.
MAX_DEPTH_LIMIT = 64


@dataclass(frozen=True)
class ParseContext:
    """State for one parse call.

    Attributes:
        scope: Registered command kinds, looked up by invocation name.
        depth: Current body nesting level (0 at the document root).
        max_depth: Deepest body nesting level accepted, at most
            ``MAX_DEPTH_LIMIT``.
    """

    scope: Scope
    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            msg = f"max_depth must be between 0 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            raise ValueError(msg)

    def nested(self) -> ParseContext:
        return replace(self, depth=self.depth + 1)


def parse(src: str, ctx: ParseContext) -> FuncResult[SyntaxTree]:
    """Parse *src* into a syntax tree under *ctx*."""
    if ctx.depth > ctx.max_depth:
        return FuncResult.failure(
            error(
                f"bodies nested deeper than {ctx.max_depth} levels",
                code=ErrorCode.SYNTAX,
            )
        )

    nodes: list[Node] = []
    try:
        for token in scan(src):
            if isinstance(token, WordToken):
                nodes.append(Text(token.text))
            elif isinstance(token, SpaceToken):
                nodes.append(Space())
            elif isinstance(token, ParbreakToken):
                nodes.append(Newline())
            elif isinstance(token, InvocationToken):
                result = _parse_invocation(token, ctx)
                if not result.ok:
                    return result
                nodes.append(result.value)
    except ScanError as exc:
        return FuncResult.failure(error(str(exc), code=ErrorCode.SYNTAX, offset=exc.offset))

    return FuncResult.success(SyntaxTree(nodes))


def _parse_invocation(token: InvocationToken, ctx: ParseContext) -> FuncResult[FuncCall]:
    header_result = parse_header(token.header)
    if not header_result.ok:
        return header_result
    header: FuncHeader = header_result.value
    name = header.name

    result = ctx.scope.parse(header, token.body, ctx.nested())
    if not result.ok:
        assert result.error is not None
        logger.debug("Invocation of %s at offset %d failed: %s", name, token.offset, result.error)
        detail = {**result.error.detail, "function": name, "offset": token.offset}
        return FuncResult.failure(result.error.model_copy(update={"detail": detail}))
    return FuncResult.success(FuncCall(name=name, value=result.value))


def parse_header(text: str) -> FuncResult[FuncHeader]:
    """Parse ``name`` or ``name: a, b, key=value`` into a header.

    Examples:
        >>> parse_header("box: pad=2pt").value.args.keyword
        {'pad': Size(points=2.0, unit='pt')}
    """
    name, sep, rest = text.partition(":")
    name = name.strip()
    if not _NAME_PATTERN.match(name):
        return FuncResult.failure(
            error(f"invalid function name: `{name}`", code=ErrorCode.SYNTAX)
        )

    args = FuncArgs()
    if sep:
        for part in _split_args(rest):
            key, eq, raw = part.partition("=")
            if eq and _NAME_PATTERN.match(key.strip()):
                value = _parse_value(raw.strip())
                if value is None:
                    return _invalid_value(raw.strip())
                args.keyword[key.strip()] = value
            else:
                value = _parse_value(part)
                if value is None:
                    return _invalid_value(part)
                args.positional.append(value)

    return FuncResult.success(FuncHeader(name=name, args=args))


def _split_args(text: str) -> list[str]:
    """Split on commas outside of string literals; drop empty parts."""
    parts: list[str] = []
    current: list[str] = []
    quoted = escaped = False
    for ch in text:
        literal = escaped
        escaped = not literal and ch == "\\"
        if not literal and ch == '"':
            quoted = not quoted
        if ch == "," and not quoted and not literal:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def _parse_value(raw: str) -> Expr | None:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return _ESCAPE_PATTERN.sub(r"\1", raw[1:-1])
    if raw in ("true", "false"):
        return raw == "true"
    if _NUMBER_PATTERN.match(raw):
        return float(raw)
    size = Size.parse(raw)
    if size is not None:
        return size
    if _NAME_PATTERN.match(raw):
        return Ident(raw)
    return None


def _invalid_value(raw: str) -> FuncResult[FuncHeader]:
    return FuncResult.failure(error(f"invalid argument: `{raw}`", code=ErrorCode.SYNTAX))
