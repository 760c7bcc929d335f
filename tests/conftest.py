"""Shared pytest fixtures and test helpers for merryctl tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

from merryctl.config.settings import MerrySettings
from merryctl.infrastructure.environment import Environment
from merryctl.infrastructure.errors import OrchestratorError

GROUPS_YAML = """\
groups:
  chains:
    description: Local chain nodes
    patterns: ["*node*", "bitcoind"]
    includes: [faucet]
    excludes: [arbitrum-node]
  explorers:
    description: Block explorers
    patterns: ["*explorer"]
  api:
    description: API and workers
    patterns: ["api*"]
    excludes: [api-worker]
  empty:
    description: Matches nothing
    patterns: ["nothing-here"]
"""

ALL_SERVICES = [
    "api",
    "api-worker",
    "arbitrum-node",
    "bitcoind",
    "btc-explorer",
    "ethereum-node",
    "evm-explorer",
    "faucet",
    "redis",
]


class FakeOrchestrator:
    """In-memory orchestrator that records every bulk command."""

    def __init__(
        self,
        services: Sequence[str] = (),
        running: Sequence[str] = (),
        *,
        fail_on: str | None = None,
    ) -> None:
        self.services = list(services)
        self.running = list(running)
        self.fail_on = fail_on
        self.calls: list[tuple[str, list[str]]] = []

    def _maybe_fail(self, action: str) -> None:
        if self.fail_on == action:
            raise OrchestratorError(
                f"Failed to {action} containers: exit status 1",
                command=["docker", "compose", action],
                returncode=1,
                output=f"{action} exploded",
            )

    def list_all_services(self) -> list[str]:
        self._maybe_fail("ps")
        return list(self.services)

    def list_running_services(self) -> list[str]:
        self._maybe_fail("ps")
        return list(self.running)

    def start(self, names: Sequence[str]) -> None:
        self.calls.append(("start", list(names)))
        self._maybe_fail("start")

    def stop(self, names: Sequence[str]) -> None:
        self.calls.append(("stop", list(names)))
        self._maybe_fail("stop")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def env_root(tmp_path: Path) -> Path:
    """Temporary project directory with a compose file and a group document."""
    (tmp_path / "docker-compose.yml").write_text("services: {}\n", encoding="utf-8")
    (tmp_path / "container-groups.yml").write_text(GROUPS_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def orchestrator() -> FakeOrchestrator:
    """Fake orchestrator with every service declared and two running."""
    return FakeOrchestrator(ALL_SERVICES, running=["bitcoind", "api"])


@pytest.fixture
def environment(env_root: Path, orchestrator: FakeOrchestrator) -> Environment:
    """Environment on the temp project wired to the fake orchestrator."""
    settings = MerrySettings.from_cli(root=env_root)
    return Environment(settings, orchestrator=orchestrator)


@pytest.fixture
def _isolated_env(
    env_root: Path,
    orchestrator: FakeOrchestrator,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Run CLI commands inside the temp project against the fake orchestrator.

    Use via ``@pytest.mark.usefixtures("_isolated_env")`` on command test
    classes; request ``orchestrator`` to inspect recorded calls.
    """
    monkeypatch.chdir(env_root)
    monkeypatch.delenv("MERRYCTL_CONFIG", raising=False)
    monkeypatch.setattr(
        "merryctl.infrastructure.environment.ComposeOrchestrator",
        lambda *args, **kwargs: orchestrator,
    )


@pytest.fixture
def make_environment(
    env_root: Path,
) -> Callable[..., tuple[Environment, FakeOrchestrator]]:
    """Factory for an Environment with a custom inventory or group document."""

    def _make(
        services: Sequence[str] = ALL_SERVICES,
        running: Sequence[str] = (),
        *,
        fail_on: str | None = None,
        groups_yaml: str | None = None,
    ) -> tuple[Environment, FakeOrchestrator]:
        if groups_yaml is not None:
            (env_root / "container-groups.yml").write_text(groups_yaml, encoding="utf-8")
        fake = FakeOrchestrator(services, running, fail_on=fail_on)
        settings = MerrySettings.from_cli(root=env_root)
        return Environment(settings, orchestrator=fake), fake

    return _make
