"""Locating opresult.toml.

An explicit ``--config`` path wins, then ``OPRESULT_CONFIG``, then the
first ``opresult.toml`` found walking up from the start directory (the
way git finds ``.git/``). Having no config file at all is fine.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "opresult.toml"
CONFIG_ENV_VAR = "OPRESULT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest opresult.toml at or above *start* (default: cwd).

    ``OPRESULT_CONFIG`` short-circuits the walk; if it names a missing
    file, no config is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | Path | None, start: Path | None = None) -> Path | None:
    """Pick the TOML file for this invocation.

    Raises:
        click.ClickException: *config_path* was given but is not a file.
    """
    if config_path is None:
        return find_config(start)
    path = Path(config_path)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {path}")
    return path
