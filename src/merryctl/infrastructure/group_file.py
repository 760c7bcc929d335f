"""Group document loading.

The document lives next to the compose file and looks like::

    groups:
      core:
        description: Chain nodes and indexers
        patterns: ["*node*", "indexer-*"]
        includes: [faucet]
        excludes: [indexer-legacy]

Only the structure is checked here. Whether patterns match anything is
decided at resolution time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from merryctl.domain.groups import GroupConfiguration
from merryctl.infrastructure.errors import ConfigMalformedError, ConfigUnreadableError

logger = logging.getLogger(__name__)

GROUPS_FILENAME = "container-groups.yml"


def parse_group_configuration(text: str, *, path: Path) -> GroupConfiguration:
    """Parse YAML *text* into a GroupConfiguration.

    An empty document yields a configuration with no groups.
    """
    try:
        data = YAML(typ="safe").load(text)
    except YAMLError as exc:
        raise ConfigMalformedError(f"Invalid YAML in {path}: {exc}", path=path) from exc

    if data is None:
        return GroupConfiguration()
    if not isinstance(data, dict):
        msg = f"Expected a mapping at the top of {path}, got {type(data).__name__}"
        raise ConfigMalformedError(msg, path=path)

    try:
        return GroupConfiguration.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid group configuration in {path}: {exc.error_count()} error(s)"
        raise ConfigMalformedError(f"{msg}\n{exc}", path=path) from exc


def load_group_configuration(path: Path) -> GroupConfiguration:
    """Read and parse the group document at *path*.

    Raises:
        ConfigUnreadableError: The file is missing or cannot be read.
        ConfigMalformedError: The content is not a valid group document.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise ConfigUnreadableError(
            f"Failed to read container groups config {path}: {exc}", path=path
        ) from exc

    config = parse_group_configuration(text, path=path)
    logger.debug("Loaded %d group(s) from %s", len(config.groups), path)
    return config
