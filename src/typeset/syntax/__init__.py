"""Syntax layer — invocation headers, syntax tree, scanner and parser.

This layer never imports command kinds; it reaches them only through the
scope carried by :class:`~typeset.syntax.parser.ParseContext`.
"""

from typeset.syntax.args import Expr, FuncArgs, FuncHeader, Ident, Size
from typeset.syntax.parser import ParseContext, parse, parse_header
from typeset.syntax.tree import FuncCall, Newline, Node, Space, SyntaxTree, Text

__all__ = [
    "Expr",
    "FuncArgs",
    "FuncCall",
    "FuncHeader",
    "Ident",
    "Newline",
    "Node",
    "ParseContext",
    "Size",
    "Space",
    "SyntaxTree",
    "Text",
    "parse",
    "parse_header",
]
