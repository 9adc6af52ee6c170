"""Subcommand modules for typeset.

Provides register_commands() which uses deferred imports to keep
``typeset --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from typeset.commands.functions import functions
    from typeset.commands.layout import layout
    from typeset.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(layout)
    cli.add_command(functions)
