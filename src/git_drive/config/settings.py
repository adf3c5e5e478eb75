"""Unified settings — CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GIT_DRIVE_*`` prefix
  3. Code defaults

The registry itself is not configured here; it is data, owned by
:class:`git_drive.infrastructure.store.ConfigStore`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class GitDriveSettings(BaseSettings):
    """Settings for one git-drive invocation.

    Stored on the :class:`AppContext` at the CLI root level.

    Attributes:
        config_dir: Directory holding the registry, or None to use the
            platform default (see :mod:`git_drive.config.discovery`).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GIT_DRIVE_",
    }

    config_dir: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only CLI flags and environment variables feed settings."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, *, config_dir: str | Path | None = None, **cli_flags: Any) -> GitDriveSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (``None`` or ``False``) are not
        passed on, so environment variables can still supply them.
        """
        overrides: dict[str, Any] = {k: v for k, v in cli_flags.items() if v}
        if config_dir is not None:
            overrides["config_dir"] = Path(config_dir)
        return cls(**overrides)
