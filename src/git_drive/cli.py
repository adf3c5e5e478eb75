"""Root CLI group for git-drive with global flags and command registration."""

from __future__ import annotations

import click

from git_drive import APP_NAME, __version__
from git_drive.commands import register_commands
from git_drive.commands._base import GdGroup
from git_drive.commands._context import AppContext
from git_drive.config.settings import GitDriveSettings


@click.group(
    cls=GdGroup,
    invoke_without_command=True,
    examples="""\
  git-drive new jane --name "Jane Doe" --email jane@example.org
  git-drive trailers jane
  git-drive --config-dir ./team-config list""",
)
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the registry (default: platform config dir).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_dir: str | None,
) -> None:
    """Manage co-authors and driver identities for pair and mob programming."""
    settings = GitDriveSettings.from_cli(
        config_dir=config_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
