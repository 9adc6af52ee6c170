"""Locating and reading ``typeset.toml``.

A document directory is configured by the nearest ``typeset.toml`` at or
above it, the way git finds ``.git/``.  ``TYPESET_CONFIG`` names a file
directly and turns the search off.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from typeset.config.models import TypesetConfig

CONFIG_FILENAME = "typeset.toml"
CONFIG_ENV_VAR = "TYPESET_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``typeset.toml`` at or above *start* (default: cwd).

    When ``TYPESET_CONFIG`` is set, only that file is considered; a value
    naming no file means "no config".
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Raw table of a config file.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> TypesetConfig:
    """Validated config sections, without env or CLI overrides.

    Falls back to discovery from *cwd* when *path* is not given and to the
    built-in defaults when nothing is found.
    """
    path = path or find_config(cwd)
    if path is None:
        return TypesetConfig()
    return TypesetConfig.model_validate(read_toml(path))
