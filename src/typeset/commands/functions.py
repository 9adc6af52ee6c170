"""``typeset functions`` — list the registered command kinds."""

from __future__ import annotations

import click

from typeset.commands._base import TypesetCommand
from typeset.commands._context import AppContext


@click.command(cls=TypesetCommand, examples="  typeset functions\n  typeset --json functions")
@click.pass_obj
def functions(app: AppContext) -> None:
    """List every function available in documents."""
    app.emit(app.service.list_functions())
