"""Command group: manage the local operator's driver identities."""

from __future__ import annotations

import click

from git_drive.commands._base import GdGroup
from git_drive.commands.records import build_delete, build_edit, build_list, build_new
from git_drive.domain.types import Kind


@click.group(
    cls=GdGroup,
    examples="""\
  git-drive me list
  git-drive me new work --name "Jane Doe" --email jane@work.example.org --key KEYID
  git-drive me edit work --no-key""",
)
def me() -> None:
    """Manage your own identities (drivers)."""


for _build in (build_list, build_new, build_edit, build_delete):
    me.add_command(_build(Kind.DRIVER))
