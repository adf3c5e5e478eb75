"""Subcommand modules for git-drive.

Provides register_commands() which wires navigator commands onto the
root group and driver commands under ``git-drive me``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register navigator commands, the trailer command and the ``me`` group."""
    from git_drive.commands.me import me
    from git_drive.commands.records import build_delete, build_edit, build_list, build_new
    from git_drive.commands.trailers import trailers
    from git_drive.domain.types import Kind

    for build in (build_list, build_new, build_edit, build_delete):
        cli.add_command(build(Kind.NAVIGATOR))

    cli.add_command(trailers)
    cli.add_command(me)
