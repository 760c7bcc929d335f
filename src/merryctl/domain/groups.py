"""Group definitions and resolution against a service inventory.

A group selects services three ways, applied in a fixed order:

1. ``patterns`` — wildcard patterns matched case-insensitively.
2. ``includes`` — exact names, kept only if present in the inventory.
3. ``excludes`` — exact names, always removed last.

Resolution never invents names: every member of the result is an
inventory member.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, field_validator

from merryctl.domain.patterns import matches


def _as_text(value: Any) -> Any:
    """Plain YAML scalars (``8080``, ``1.0``, ``true``) stand for their text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class GroupDefinition(BaseModel):
    """One named rule set from the group document."""

    model_config = {"frozen": True, "extra": "ignore"}

    description: str = ""
    patterns: list[str] = Field(default_factory=list)
    includes: list[str] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else _as_text(value)

    @field_validator("patterns", "includes", "excludes", mode="before")
    @classmethod
    def _none_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [_as_text(item) for item in value]
        return value


class GroupConfiguration(BaseModel):
    """Every group in the document, keyed by group name."""

    model_config = {"frozen": True, "extra": "ignore"}

    groups: dict[str, GroupDefinition] = Field(default_factory=dict)

    @field_validator("groups", mode="before")
    @classmethod
    def _none_groups(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            # A bare ``name:`` key loads as None and means an empty group.
            return {
                _as_text(name): ({} if group is None else group) for name, group in value.items()
            }
        return value

    def get(self, name: str) -> GroupDefinition | None:
        """Return the group called *name*, or None."""
        return self.groups.get(name)

    def names(self) -> list[str]:
        """Group names in sorted order."""
        return sorted(self.groups)


def resolve_group(group: GroupDefinition, inventory: Iterable[str]) -> list[str]:
    """Compute the containers *group* selects from *inventory*.

    Returns a sorted, de-duplicated list.
    """
    candidates = list(inventory)
    patterns = [p.lower() for p in group.patterns]

    matched: set[str] = set()
    for candidate in candidates:
        folded = candidate.lower()
        if any(matches(folded, pattern) for pattern in patterns):
            matched.add(candidate)

    known = set(candidates)
    matched.update(name for name in group.includes if name in known)
    matched.difference_update(group.excludes)

    return sorted(matched)
