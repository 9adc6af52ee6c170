"""Root CLI group for typeset with global flags and command registration."""

from __future__ import annotations

import click

from typeset import __version__
from typeset.commands import register_commands
from typeset.commands._context import AppContext
from typeset.config.settings import TypesetSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="typeset")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log parse and layout details to stderr.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Use this typeset.toml instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """typeset — parse and lay out bracket-function documents."""
    settings = TypesetSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
