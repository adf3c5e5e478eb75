"""Command factories shared by navigator and driver commands.

Navigators and drivers support the same list/new/edit/delete verbs; the
factories below build one Click command per verb and kind.  Driver
commands additionally accept a signing key.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from git_drive.commands._base import GdCommand
from git_drive.domain.types import Kind

if TYPE_CHECKING:
    from git_drive.commands._context import AppContext


def _prefix(kind: Kind) -> str:
    return "git-drive me" if kind is Kind.DRIVER else "git-drive"


def _with_key_options(kind: Kind, *, allow_clear: bool) -> Callable[[Any], Any]:
    def decorate(func: Any) -> Any:
        if kind is not Kind.DRIVER:
            return func
        if allow_clear:
            func = click.option("--no-key", "clear_key", is_flag=True, help="Remove the signing key.")(
                func
            )
        return click.option("--key", default=None, help="Signing key reference.")(func)

    return decorate


def build_list(kind: Kind) -> click.Command:
    prefix = _prefix(kind)

    @click.command(
        "list",
        cls=GdCommand,
        examples=f"  {prefix} list\n  git-drive --json {'me ' if kind is Kind.DRIVER else ''}list",
        help=f"List known {kind}s as `alias: name <email>`.",
    )
    @click.pass_obj
    def list_cmd(app: AppContext) -> None:
        app.emit(app.registry.list_entries(kind))

    return list_cmd


def build_new(kind: Kind) -> click.Command:
    prefix = _prefix(kind)
    key_example = " --key ~/.ssh/id_ed25519.pub" if kind is Kind.DRIVER else ""

    @click.command(
        "new",
        cls=GdCommand,
        examples=f"""\
  {prefix} new jane --name "Jane Doe" --email jane@example.org{key_example}""",
        help=f"Add a new {kind}.",
    )
    @click.argument("alias")
    @click.option("--name", required=True, help="Full name used in the trailer.")
    @click.option("--email", required=True, help="Email address used in the trailer.")
    @_with_key_options(kind, allow_clear=False)
    @click.pass_obj
    def new(app: AppContext, alias: str, name: str, email: str, key: str | None = None) -> None:
        app.emit(app.registry.add(kind, alias, name=name, email=email, key=key))

    return new


def build_edit(kind: Kind) -> click.Command:
    prefix = _prefix(kind)

    @click.command(
        "edit",
        cls=GdCommand,
        examples=f"""\
  {prefix} edit jane --email jane@work.example.org
  {prefix} edit jane --name 'Jane Q. Doe'""",
        help=f"Change the name, email{' or key' if kind is Kind.DRIVER else ''} of a {kind}.",
    )
    @click.argument("alias")
    @click.option("--name", default=None, help="New full name.")
    @click.option("--email", default=None, help="New email address.")
    @_with_key_options(kind, allow_clear=True)
    @click.pass_obj
    def edit(
        app: AppContext,
        alias: str,
        name: str | None,
        email: str | None,
        key: str | None = None,
        clear_key: bool = False,
    ) -> None:
        app.emit(
            app.registry.edit(kind, alias, name=name, email=email, key=key, clear_key=clear_key)
        )

    return edit


def build_delete(kind: Kind) -> click.Command:
    prefix = _prefix(kind)

    @click.command(
        "delete",
        cls=GdCommand,
        examples=f"""\
  {prefix} delete jane
  {prefix} delete jane joe""",
        help=f"Delete one or more {kind}s by alias.",
    )
    @click.argument("aliases", nargs=-1, required=True)
    @click.pass_obj
    def delete(app: AppContext, aliases: tuple[str, ...]) -> None:
        app.emit(app.registry.delete(kind, list(aliases)))

    return delete
