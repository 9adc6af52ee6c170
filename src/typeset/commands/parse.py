"""``typeset parse FILE`` — print the syntax tree of a document."""

from __future__ import annotations

from pathlib import Path

import click

from typeset.commands._base import TypesetCommand
from typeset.commands._context import AppContext

_EXAMPLES = """\
  typeset parse doc.tps
  typeset --json parse doc.tps
  echo '[bold] hi' | typeset parse -"""


@click.command(cls=TypesetCommand, examples=_EXAMPLES)
@click.argument("source", type=click.Path(allow_dash=True, dir_okay=False, path_type=Path))
@click.pass_obj
def parse(app: AppContext, source: Path) -> None:
    """Parse SOURCE and show the resulting syntax tree."""
    if str(source) == "-":
        app.emit(app.service.parse_source(click.get_text_stream("stdin").read(), name="<stdin>"))
    else:
        app.emit(app.service.parse_file(source))
