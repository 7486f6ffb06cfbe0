"""Locate ``ooplab.toml``.

An explicit path (``--config`` or ``OOPLAB_CONFIG``) must exist; otherwise
the nearest ``ooplab.toml`` in the start directory or any parent is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "ooplab.toml"
CONFIG_ENV_VAR = "OOPLAB_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly requested config file does not exist."""


def resolve_explicit(path: str | os.PathLike[str]) -> Path:
    """Return *path* as a file path, raising ``ConfigNotFoundError`` if absent."""
    p = Path(path).expanduser()
    if not p.is_file():
        msg = f"Config file not found: {p}"
        raise ConfigNotFoundError(msg)
    return p


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None when there is none.

    ``OOPLAB_CONFIG`` wins over the walk-up search from *start*
    (default: cwd).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return resolve_explicit(env_path)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
