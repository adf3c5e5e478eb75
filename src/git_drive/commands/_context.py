"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the lazily created ConfigStore and the
result emission rules (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from git_drive.config.logging import configure_logging
from git_drive.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from git_drive.config.settings import GitDriveSettings
    from git_drive.infrastructure.store import ConfigStore
    from git_drive.services.registry import RegistryService
    from git_drive.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first use so ``--help`` and ``--version``
    never touch the filesystem.
    """

    def __init__(self, settings: GitDriveSettings) -> None:
        self.settings = settings
        self._store: ConfigStore | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> ConfigStore:
        """The config store (created lazily on first access)."""
        if self._store is None:
            from git_drive.config.discovery import find_config_dir
            from git_drive.infrastructure.store import ConfigStore

            self._store = ConfigStore(find_config_dir(self.settings.config_dir))
        return self._store

    @property
    def registry(self) -> RegistryService:
        from git_drive.services.registry import RegistryService

        return RegistryService(self.store)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they never
          end up in piped trailers.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
