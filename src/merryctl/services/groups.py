"""GroupService — bulk enable/disable and listing of container groups.

Pipeline per bulk operation:
LOAD CONFIG → FETCH INVENTORY → RESOLVE EACH GROUP → UNION → ONE BULK CALL

Enable resolves against every known service; disable only against running
ones, so it can never target a container that is already stopped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from merryctl.domain.groups import GroupConfiguration, resolve_group
from merryctl.infrastructure.errors import ConfigError, OrchestratorError
from merryctl.services.base import BaseService
from merryctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

NO_CONTAINERS_MESSAGE = "No containers found matching the specified groups"


def unknown_group_warning(name: str) -> str:
    """Warning text for a requested group missing from the document."""
    return f"Group '{name}' not found"


def union_groups(
    config: GroupConfiguration,
    group_names: Sequence[str],
    inventory: Sequence[str],
) -> tuple[list[str], list[str], list[str]]:
    """Resolve *group_names* against *inventory* and union the results.

    Returns ``(containers, processed, warnings)``: the sorted union, the
    known group names in request order, and one warning per unknown name.
    A name requested twice is processed once.
    """
    selected: set[str] = set()
    processed: list[str] = []
    warnings: list[str] = []
    for name in dict.fromkeys(group_names):
        group = config.get(name)
        if group is None:
            warnings.append(unknown_group_warning(name))
            continue
        matched = resolve_group(group, inventory)
        logger.debug("Group %s matched %d container(s): %s", name, len(matched), matched)
        selected.update(matched)
        processed.append(name)
    return sorted(selected), processed, warnings


class GroupService(BaseService):
    """Enable, disable and list container groups."""

    def enable(self, group_names: Sequence[str]) -> ServiceResult:
        """Start every container selected by *group_names*."""
        orchestrator = self._env.orchestrator
        return self._bulk(
            "enable",
            group_names,
            action="start",
            inventory=orchestrator.list_all_services,
            command=orchestrator.start,
        )

    def disable(self, group_names: Sequence[str]) -> ServiceResult:
        """Stop every running container selected by *group_names*."""
        orchestrator = self._env.orchestrator
        return self._bulk(
            "disable",
            group_names,
            action="stop",
            inventory=orchestrator.list_running_services,
            command=orchestrator.stop,
        )

    def _bulk(
        self,
        op: str,
        group_names: Sequence[str],
        *,
        action: str,
        inventory: Callable[[], list[str]],
        command: Callable[[Sequence[str]], None],
    ) -> ServiceResult:
        requested = list(group_names)
        if not requested:
            return ServiceResult.failure(op, "NO_GROUPS", "No groups specified")

        try:
            config = self._env.load_groups()
        except ConfigError as exc:
            return self._config_failure(op, exc)

        try:
            services = inventory()
        except OrchestratorError as exc:
            return self._orchestrator_failure(op, exc)

        containers, processed, warnings = union_groups(config, requested, services)
        data: dict[str, Any] = {
            "action": action,
            "containers": containers,
            "count": len(containers),
            "groups": processed,
            "requested": requested,
        }

        if not containers:
            logger.info(NO_CONTAINERS_MESSAGE)
            data["message"] = NO_CONTAINERS_MESSAGE
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        logger.info("%s containers: %s", action.capitalize(), ", ".join(containers))
        try:
            command(containers)
        except OrchestratorError as exc:
            return self._orchestrator_failure(op, exc, warnings=warnings)

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def list_groups(self) -> ServiceResult:
        """Every configured group with its containers and their run state."""
        op = "list_groups"

        try:
            config = self._env.load_groups()
        except ConfigError as exc:
            return self._config_failure(op, exc)

        orchestrator = self._env.orchestrator
        try:
            all_services = orchestrator.list_all_services()
            running = set(orchestrator.list_running_services())
        except OrchestratorError as exc:
            return self._orchestrator_failure(op, exc)

        groups: list[dict[str, Any]] = []
        for name in config.names():
            group = config.groups[name]
            matched = resolve_group(group, all_services)
            groups.append(
                {
                    "name": name,
                    "description": group.description,
                    "count": len(matched),
                    "containers": [
                        {"name": c, "status": "running" if c in running else "stopped"}
                        for c in matched
                    ],
                }
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"groups": groups, "count": len(groups)},
        )
