"""Locate the surisign.toml that applies to an invocation.

Lookup order: ``--config``, then ``$SURISIGN_CONFIG``, then the nearest
surisign.toml above the working directory. A file named explicitly must
exist; finding nothing on the walk-up just means defaults apply.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "surisign.toml"
CONFIG_ENV_VAR = "SURISIGN_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly named config file does not exist."""


def _require_file(path: str, origin: str) -> Path:
    candidate = Path(path).expanduser()
    if not candidate.is_file():
        msg = f"Config file {candidate} given by {origin} does not exist"
        raise ConfigNotFoundError(msg)
    return candidate


def find_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Resolve the config file path, or None when only defaults apply.

    Raises:
        ConfigNotFoundError: *explicit* or ``$SURISIGN_CONFIG`` names a
            missing file.
    """
    if explicit:
        return _require_file(explicit, "--config")
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return _require_file(env_path, CONFIG_ENV_VAR)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
