"""Exceptions raised by the infrastructure layer.

Services catch these at their boundary and translate them into a failed
ServiceResult; nothing above the service layer sees them.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class MerryError(Exception):
    """Base exception for all merryctl infrastructure errors."""


class ConfigError(MerryError):
    """The group configuration could not be loaded."""

    code = "CONFIG_ERROR"

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigUnreadableError(ConfigError):
    """The group configuration file could not be read."""

    code = "CONFIG_UNREADABLE"


class ConfigMalformedError(ConfigError):
    """The group configuration file does not have the expected shape."""

    code = "CONFIG_MALFORMED"


class OrchestratorError(MerryError):
    """A compose invocation failed or could not be started."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str],
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = list(command)
        self.returncode = returncode
        self.output = output

    def detail(self) -> dict[str, object]:
        """Structured detail for a ServiceError payload."""
        detail: dict[str, object] = {"command": " ".join(self.command)}
        if self.returncode is not None:
            detail["returncode"] = self.returncode
        if self.output:
            detail["output"] = self.output
        return detail


class FaucetError(MerryError):
    """A faucet request failed or returned an unusable response."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
