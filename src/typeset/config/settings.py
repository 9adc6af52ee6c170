"""TypesetSettings — one frozen object for CLI flags, environment and TOML.

Later sources lose to earlier ones:

1. keyword arguments (the global CLI flags)
2. ``TYPESET_*`` environment variables, ``__`` for nesting
   (``TYPESET_PAGE__MARGIN=36``)
3. the ``typeset.toml`` found by :func:`~typeset.config.discovery.find_config`
4. defaults of the section models
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from typeset.config.discovery import find_config, read_toml
from typeset.config.models import PageConfig, ParseConfig, TextConfig
from typeset.layout.context import DocumentStyle, PageStyle, TextStyle


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by an already read ``typeset.toml`` table."""

    def __init__(self, settings_cls: type[BaseSettings], table: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._table = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


# BaseSettings builds its sources inside __init__, so the table chosen by
# from_cli() reaches settings_customise_sources() through this slot.
_pending = threading.local()


@contextmanager
def _toml_table(table: dict[str, Any]) -> Iterator[None]:
    _pending.table = table
    try:
        yield
    finally:
        _pending.table = None


class TypesetSettings(BaseSettings):
    """Settings of one typeset invocation.

    Attributes:
        config_path: The ``typeset.toml`` the TOML layer came from, if any.
        json_output: Emit results as JSON instead of Rich text.
        verbose: DEBUG logging for ``typeset.*`` loggers.
        log_json: Render log lines as JSON.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TYPESET_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    page: PageConfig = Field(default_factory=PageConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        table = getattr(_pending, "table", None) or {}
        return init_settings, env_settings, TomlSettingsSource(settings_cls, table)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> TypesetSettings:
        """Settings for a CLI run.

        An explicit *config_path* (``-c``) must name an existing file;
        otherwise ``typeset.toml`` is looked up from *start* (default: cwd).

        Raises:
            click.ClickException: If ``-c`` names no file or the TOML is
                malformed.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(start)

        table = read_toml(toml_path) if toml_path is not None else {}
        with _toml_table(table):
            return cls(config_path=toml_path, **flags)

    def document_style(self) -> DocumentStyle:
        """Starting style of every layout pass: the [page] and [text] sections."""
        return DocumentStyle(
            page=PageStyle(
                width=self.page.width,
                height=self.page.height,
                margin=self.page.margin,
            ),
            text=TextStyle(
                font_size=self.text.font_size,
                line_spacing=self.text.line_spacing,
            ),
            alignment=self.text.alignment,
        )
