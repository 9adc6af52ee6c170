"""typeset — function definition and two-phase execution for documents.

Command kinds subclass :class:`~typeset.func.base.Function` and are
registered in a :class:`~typeset.func.scope.Scope`.  The parser turns each
invocation into a command value; the layout pass turns values into Commands.
"""

from importlib.metadata import PackageNotFoundError, version

from typeset.func import BodyPolicy, FuncResult, Function, Scope, TypesetError

try:
    __version__ = version("typeset")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "BodyPolicy",
    "FuncResult",
    "Function",
    "Scope",
    "TypesetError",
]
