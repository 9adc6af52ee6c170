"""Rich Console factory and theme for typeset output.

Consoles render into a StringIO buffer so renderers keep a
``render_*() -> str`` contract.  In non-TTY environments (tests, pipes)
Rich disables color codes by itself.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TYPESET_THEME = Theme(
    {
        "ts.ok": "bold green",
        "ts.error": "bold red",
        "ts.op": "bold cyan",
        "ts.key": "dim",
        "ts.func": "bold magenta",
        "ts.text": "default",
        "ts.struct": "dim",
        "ts.command": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TYPESET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Everything printed to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
