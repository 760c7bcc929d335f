"""Environment — the single dependency injected into every service.

Bundles the settings with the resolved compose and group file paths and
the external collaborators (orchestrator, faucet). Collaborators are built
lazily from settings unless injected, which is how tests swap in fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from merryctl.infrastructure.compose import ComposeOrchestrator
from merryctl.infrastructure.faucet import FaucetClient
from merryctl.infrastructure.group_file import load_group_configuration

if TYPE_CHECKING:
    from merryctl.config.settings import MerrySettings
    from merryctl.domain.groups import GroupConfiguration
    from merryctl.infrastructure.compose import Orchestrator


class Environment:
    """A local development environment rooted at ``settings.root``."""

    def __init__(
        self,
        settings: MerrySettings,
        *,
        orchestrator: Orchestrator | None = None,
        faucet: FaucetClient | None = None,
    ) -> None:
        self.settings = settings
        self.root = settings.root
        self._orchestrator = orchestrator
        self._faucet = faucet

    @property
    def compose_file(self) -> Path:
        """The compose descriptor, resolved against the project root."""
        path = Path(self.settings.compose.file).expanduser()
        return path if path.is_absolute() else self.root / path

    @property
    def groups_file(self) -> Path:
        """The group document, resolved against the compose file's directory."""
        path = Path(self.settings.groups.file).expanduser()
        return path if path.is_absolute() else self.compose_file.parent / path

    @property
    def orchestrator(self) -> Orchestrator:
        """The compose orchestrator (created lazily on first access)."""
        if self._orchestrator is None:
            self._orchestrator = ComposeOrchestrator(
                self.compose_file,
                command=self.settings.compose.command,
                project_name=self.settings.compose.project_name,
            )
        return self._orchestrator

    @property
    def faucet(self) -> FaucetClient:
        """The faucet client (created lazily on first access)."""
        if self._faucet is None:
            self._faucet = FaucetClient(self.settings.faucet)
        return self._faucet

    def load_groups(self) -> GroupConfiguration:
        """Load the group document fresh from disk."""
        return load_group_configuration(self.groups_file)
