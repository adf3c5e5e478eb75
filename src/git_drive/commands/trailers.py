"""Command: print co-author trailers for navigator queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from git_drive.commands._base import GdCommand

if TYPE_CHECKING:
    from git_drive.commands._context import AppContext


@click.command(
    cls=GdCommand,
    examples="""\
  git-drive trailers jane
  git-drive trailers jane joe >> .git/COMMIT_EDITMSG
  git-drive --json trailers jan""",
)
@click.argument("queries", nargs=-1, required=True)
@click.pass_obj
def trailers(app: AppContext, queries: tuple[str, ...]) -> None:
    """Resolve navigator QUERIES and print their Co-Authored-By trailers.

    Each query is an alias, or a case- and accent-insensitive prefix of
    exactly one alias.
    """
    app.emit(app.registry.trailers(list(queries)))
