"""``typeset layout FILE`` — print the layout Commands of a document."""

from __future__ import annotations

from pathlib import Path

import click

from typeset.commands._base import TypesetCommand
from typeset.commands._context import AppContext

_EXAMPLES = """\
  typeset layout doc.tps
  typeset --json layout doc.tps
  typeset -c print.toml layout doc.tps"""


@click.command(cls=TypesetCommand, examples=_EXAMPLES)
@click.argument("source", type=click.Path(allow_dash=True, dir_okay=False, path_type=Path))
@click.pass_obj
def layout(app: AppContext, source: Path) -> None:
    """Parse and lay out SOURCE, showing the produced Commands."""
    if str(source) == "-":
        app.emit(app.service.layout_source(click.get_text_stream("stdin").read(), name="<stdin>"))
    else:
        app.emit(app.service.layout_file(source))
