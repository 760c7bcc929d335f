"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Environment initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from merryctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from merryctl.config.settings import MerrySettings
    from merryctl.infrastructure.environment import Environment
    from merryctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The environment is built on first use so ``--help`` and ``--version``
    never touch the compose file or spawn a subprocess.
    """

    def __init__(self, settings: MerrySettings) -> None:
        self.settings = settings
        self._env: Environment | None = None

        from merryctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def env(self) -> Environment:
        """The environment (created lazily on first access)."""
        if self._env is None:
            from merryctl.infrastructure.environment import Environment

            self._env = Environment(self.settings)
        return self._env

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        # In JSON mode, warnings are already in the serialized payload.
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
