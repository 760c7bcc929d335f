"""Compose orchestrator — service inventory queries and bulk start/stop.

Every call is a single ``docker compose`` subprocess against the project's
compose file. Queries capture output; bulk commands inherit stdout/stderr
so the operator sees compose's own progress.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from merryctl.infrastructure.errors import OrchestratorError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("docker", "compose")


class Orchestrator(Protocol):
    """The narrow surface services need from a container orchestrator."""

    def list_all_services(self) -> list[str]: ...

    def list_running_services(self) -> list[str]: ...

    def start(self, names: Sequence[str]) -> None: ...

    def stop(self, names: Sequence[str]) -> None: ...


def parse_service_lines(output: str) -> list[str]:
    """Split newline-delimited service names, dropping blank lines."""
    return [line.strip() for line in output.splitlines() if line.strip()]


class ComposeOrchestrator:
    """Drive ``docker compose`` for one compose file."""

    def __init__(
        self,
        compose_file: Path,
        *,
        command: Sequence[str] = DEFAULT_COMMAND,
        project_name: str | None = None,
    ) -> None:
        self.compose_file = compose_file
        self._command = list(command)
        self._project_name = project_name

    def _base_args(self) -> list[str]:
        args = [*self._command, "-f", str(self.compose_file)]
        if self._project_name:
            args += ["-p", self._project_name]
        return args

    # ------------------------------------------------------------------
    # Inventory queries
    # ------------------------------------------------------------------

    def list_all_services(self) -> list[str]:
        """Every service compose knows about, running or not."""
        return self._query("ps", "--services")

    def list_running_services(self) -> list[str]:
        """Services with a running container."""
        return self._query("ps", "--services", "--filter", "status=running")

    def _query(self, *args: str) -> list[str]:
        argv = [*self._base_args(), *args]
        logger.debug("Running %s", " ".join(argv))
        try:
            proc = subprocess.run(argv, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as exc:
            output = ((exc.stderr or "") + (exc.stdout or "")).strip()
            raise OrchestratorError(
                f"Failed to list services: {' '.join(args)} exited with status {exc.returncode}",
                command=argv,
                returncode=exc.returncode,
                output=output,
            ) from exc
        except OSError as exc:
            raise OrchestratorError(
                f"Failed to run {self._command[0]}: {exc}", command=argv
            ) from exc
        services = parse_service_lines(proc.stdout)
        logger.debug("compose %s returned %d service(s)", " ".join(args), len(services))
        return services

    # ------------------------------------------------------------------
    # Bulk commands
    # ------------------------------------------------------------------

    def start(self, names: Sequence[str]) -> None:
        """Start every named service in one compose invocation."""
        self._bulk("start", names)

    def stop(self, names: Sequence[str]) -> None:
        """Stop every named service in one compose invocation."""
        self._bulk("stop", names)

    def _bulk(self, action: str, names: Sequence[str]) -> None:
        argv = [*self._base_args(), action, *names]
        logger.debug("Running %s", " ".join(argv))
        try:
            proc = subprocess.run(argv, check=False)
        except OSError as exc:
            raise OrchestratorError(
                f"Failed to run {self._command[0]}: {exc}", command=argv
            ) from exc
        if proc.returncode != 0:
            raise OrchestratorError(
                f"Failed to {action} containers: exit status {proc.returncode}",
                command=argv,
                returncode=proc.returncode,
            )
