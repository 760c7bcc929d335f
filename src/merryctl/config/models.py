"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, merryctl.toml only contains
overrides. A project with a plain ``docker-compose.yml`` and a
``container-groups.yml`` next to it needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ComposeConfig(BaseModel):
    """[compose] section."""

    model_config = {"frozen": True}

    file: str = "docker-compose.yml"
    command: list[str] = Field(default_factory=lambda: ["docker", "compose"])
    project_name: str | None = None


class GroupsConfig(BaseModel):
    """[groups] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the compose file's directory.
    file: str = "container-groups.yml"


class FaucetConfig(BaseModel):
    """[faucet] section."""

    model_config = {"frozen": True}

    bitcoin_url: str = "http://127.0.0.1:3000/faucet"
    bitcoin_explorer_url: str = "http://localhost:5050"
    starknet_url: str = "http://localhost:8547/mint"
    starknet_amount: int = 1_000_000_000_000_000_000
    timeout: float = 10.0
