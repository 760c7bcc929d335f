"""Click base classes with on-demand usage examples.

MerryCommand and MerryGroup take an ``examples`` block. ``--examples``
prints it and exits, and ``--help`` ends with a one-line pointer to it,
so help text stays short.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples to see usage examples."


def _examples_option(examples: str) -> click.Option:
    """Build an eager ``--examples`` flag that prints *examples* and exits."""
    text = textwrap.dedent(examples).strip("\n")

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(text, "  "))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


def _with_examples(cmd: click.Command, examples: str | None) -> None:
    if not examples:
        return
    cmd.params.append(_examples_option(examples))
    cmd.epilog = f"{cmd.epilog}\n\n{_EXAMPLES_HINT}" if cmd.epilog else _EXAMPLES_HINT


class MerryCommand(click.Command):
    """Click Command that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        _with_examples(self, examples)


class MerryGroup(click.Group):
    """Click Group that supports an ``--examples`` flag.

    Subcommands declared with ``@group.command(...)`` are MerryCommands,
    so they accept ``examples=`` without an explicit ``cls=``.
    """

    command_class = MerryCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        _with_examples(self, examples)
