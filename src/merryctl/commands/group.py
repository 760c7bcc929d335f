"""Command group: enable, disable and inspect container groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from merryctl.commands._base import MerryGroup

if TYPE_CHECKING:
    from merryctl.commands._context import AppContext

_GROUP_EXAMPLES = """\
  merryctl group list
  merryctl group enable chains
  merryctl group enable chains explorers
  merryctl group disable explorers
  merryctl --json group list"""


@click.group(cls=MerryGroup, examples=_GROUP_EXAMPLES)
@click.pass_obj
def group(app: AppContext) -> None:
    """Manage container groups defined in container-groups.yml."""


@group.command(
    name="list",
    examples="""\
  merryctl group list
  merryctl -q group list
  merryctl --json group list""",
)
@click.pass_obj
def list_groups(app: AppContext) -> None:
    """List every group with its containers and whether they are running."""
    from merryctl.services.groups import GroupService

    app.emit(GroupService(app.env).list_groups())


@group.command(
    examples="""\
  merryctl group enable chains
  merryctl group enable chains explorers
  merryctl -f ./local/docker-compose.yml group enable chains""",
)
@click.argument("names", nargs=-1)
@click.pass_obj
def enable(app: AppContext, names: tuple[str, ...]) -> None:
    """Start all containers in the NAMES groups."""
    from merryctl.services.groups import GroupService

    app.emit(GroupService(app.env).enable(list(names)))


@group.command(
    examples="""\
  merryctl group disable explorers
  merryctl group disable chains explorers""",
)
@click.argument("names", nargs=-1)
@click.pass_obj
def disable(app: AppContext, names: tuple[str, ...]) -> None:
    """Stop the running containers in the NAMES groups."""
    from merryctl.services.groups import GroupService

    app.emit(GroupService(app.env).disable(list(names)))
