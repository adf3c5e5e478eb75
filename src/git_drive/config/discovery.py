"""Config directory discovery.

The registry lives in the platform's per-user config directory, as
reported by ``click.get_app_dir``.  ``GIT_DRIVE_CONFIG_DIR`` (or the
``--config-dir`` CLI flag) overrides it.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from git_drive import APP_NAME

CONFIG_DIR_ENV_VAR = "GIT_DRIVE_CONFIG_DIR"
CONFIG_FILENAME = f"{APP_NAME}_config"
LEGACY_CONFIG_FILENAME = f"{APP_NAME}_config.json"


def find_config_dir(override: Path | None = None) -> Path | None:
    """Return the directory holding the registry files.

    Checks *override* first, then the ``GIT_DRIVE_CONFIG_DIR`` env var,
    then the platform default.  Returns None if the home directory is
    unknown, in which case there is no place to read or write config.
    """
    if override is not None:
        return override

    env_path = os.environ.get(CONFIG_DIR_ENV_VAR)
    if env_path:
        return Path(env_path)

    app_dir = click.get_app_dir(APP_NAME)
    # expanduser() leaves "~" untouched when no home directory is known.
    if app_dir.startswith("~"):
        return None
    return Path(app_dir)
