"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns logging setup, the lazily built
DocumentService, and result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typeset.output.formatters import format_result

if TYPE_CHECKING:
    from typeset.config.settings import TypesetSettings
    from typeset.services.document import DocumentService
    from typeset.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TypesetSettings) -> None:
        self.settings = settings
        self._service: DocumentService | None = None

        from typeset.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> DocumentService:
        """The document service (created on first access)."""
        if self._service is None:
            from typeset.services.document import DocumentService

            self._service = DocumentService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult; failures go to stderr and exit with code 1."""
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
