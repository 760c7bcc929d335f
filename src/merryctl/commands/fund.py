"""Command: fund an address from the local faucets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from merryctl.commands._base import MerryCommand

if TYPE_CHECKING:
    from merryctl.commands._context import AppContext


@click.command(
    cls=MerryCommand,
    examples="""\
  merryctl fund bcrt1qw508d6qejxtdg4y5r3zarvary0c5xw7kygt080
  merryctl fund 0x04a1f5c0d6e4b3a29f8e7d6c5b4a39281706f5e4d3c2b1a09f8e7d6c5b4a3928""",
)
@click.argument("address")
@click.pass_obj
def fund(app: AppContext, address: str) -> None:
    """Send test funds to ADDRESS (bitcoin regtest or starknet)."""
    from merryctl.services.fund import FundService

    app.emit(FundService(app.env).fund(address))
