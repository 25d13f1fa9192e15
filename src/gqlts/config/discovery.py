"""Locate gqlts.toml.

The file is found by walking up from the working directory, the way git
finds .git/.  GQLTS_CONFIG names a file directly; --config bypasses the
search entirely (see :mod:`gqlts.config.settings`).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "gqlts.toml"
CONFIG_ENV_VAR = "GQLTS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest gqlts.toml at or above *start* (default: cwd).

    A set GQLTS_CONFIG wins outright, and yields None when it names a
    missing file rather than falling back to the search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        named = Path(env_path)
        return named if named.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
