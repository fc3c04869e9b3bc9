"""Config file location.

A library should not pick up configuration it was not pointed at, so there
is no directory search: the file is either passed explicitly or named by the
``ZONERESOLVE_CONFIG`` env var. Naming a file that does not exist is an
error rather than a silent fall-back to defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

from zoneresolve.errors import ConfigError

CONFIG_ENV_VAR = "ZONERESOLVE_CONFIG"


def resolve_config_path(config_path: str | Path | None = None) -> Path | None:
    """Return the TOML file to load, or None when none was requested.

    An explicit *config_path* wins over the env var.

    Raises:
        ConfigError: The requested path is not an existing file.
    """
    if config_path:
        source, raw = "config_path", str(config_path)
    else:
        env_value = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if not env_value:
            return None
        source, raw = CONFIG_ENV_VAR, env_value

    path = Path(raw).expanduser()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path} (from {source})", path=str(path))
    return path
