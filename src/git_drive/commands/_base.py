"""Click base classes adding an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-copy invocations
and exits.  :class:`GdGroup` makes every subcommand a :class:`GdCommand`.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and registers the eager ``--examples`` option."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_print_examples,
                help="Show usage examples.",
            )
        )


class GdCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class GdGroup(_ExamplesMixin, click.Group):
    command_class = GdCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
