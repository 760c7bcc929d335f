"""BaseService — common foundation for merryctl services.

Every service receives an :class:`Environment` at construction time and
reaches the orchestrator, faucet and group document only through it.
Infrastructure exceptions are translated into failed results here so each
operation can stay a straight-line resolve-then-act pass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from merryctl.infrastructure.errors import ConfigError, OrchestratorError
from merryctl.services.result import ServiceResult

if TYPE_CHECKING:
    from merryctl.infrastructure.environment import Environment

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class GroupService(BaseService):
            def enable(self, group_names: list[str]) -> ServiceResult:
                groups = self._env.load_groups()
                ...
    """

    def __init__(self, env: Environment) -> None:
        self._env = env

    @staticmethod
    def _config_failure(op: str, exc: ConfigError) -> ServiceResult:
        logger.debug("Group config failed to load: %s", exc.message)
        return ServiceResult.failure(
            op,
            exc.code,
            exc.message,
            detail={"path": str(exc.path)},
        )

    @staticmethod
    def _orchestrator_failure(
        op: str,
        exc: OrchestratorError,
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        logger.debug("Orchestrator call failed: %s", exc.message)
        return ServiceResult.failure(
            op,
            "ORCHESTRATOR_FAILED",
            exc.message,
            detail=exc.detail(),
            warnings=warnings,
        )
