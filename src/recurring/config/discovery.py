"""Config file discovery and loading.

Settings live either in a dedicated ``recurring.toml`` or in the
``[tool.recurring]`` table of a project's ``pyproject.toml``. The nearest
directory from the starting point upwards that has either one wins, with
``recurring.toml`` preferred inside a single directory. ``RECURRING_CONFIG``
names a file explicitly and bypasses the search.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from recurring.config.models import RecurringConfig

CONFIG_FILENAME = "recurring.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "RECURRING_CONFIG"


class ConfigError(ValueError):
    """Raised when a config file is missing where one was demanded, or cannot be parsed."""


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, raising :class:`ConfigError` on syntax errors."""
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the recurring settings table held in *path*.

    For a ``pyproject.toml`` that is ``[tool.recurring]`` (empty when the
    table is absent); any other file is the table itself.
    """
    data = read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get("recurring", {})
    return data


def _search_dirs(start: Path | None) -> Iterator[Path]:
    here = (start or Path.cwd()).resolve()
    yield here
    yield from here.parents


def _has_tool_table(pyproject: Path) -> bool:
    return "recurring" in read_toml(pyproject).get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file that applies to *start* (default: cwd).

    Returns None when nothing is found. Raises :class:`ConfigError` when
    ``RECURRING_CONFIG`` is set but does not name an existing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.is_file():
            msg = f"{CONFIG_ENV_VAR} is set to {path}, which is not a file"
            raise ConfigError(msg)
        return path

    for directory in _search_dirs(start):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> RecurringConfig:
    """Load and validate config from *path*, or from the file found from *cwd*.

    Returns default RecurringConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return RecurringConfig()

    return RecurringConfig.model_validate(read_config_table(path))
