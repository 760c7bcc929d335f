"""Subcommand modules for merryctl.

Provides register_commands() which uses deferred imports to keep
``merryctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root CLI group."""
    from merryctl.commands.fund import fund
    from merryctl.commands.group import group

    cli.add_command(group)
    cli.add_command(fund)
