"""Entity identity models.

Usage:
    entity = EntityId.parse("yukes")   # EntityId(key="YUKES")
    entity == EntityId.parse(" Yukes ")  # True
"""

from __future__ import annotations

from dataclasses import dataclass

VariableName = str
"""Name of a numeric piece of per-entity state (case-sensitive)."""

SwitchName = str
"""Name of a boolean piece of per-entity state (case-sensitive)."""


@dataclass(frozen=True, slots=True)
class EntityId:
    """Normalized identifier of a scripted NPC, location or other tracked object.

    Keys are matched case-insensitively, so the stored key is always upper-case.
    Build instances through parse() rather than the constructor.
    """

    key: str

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.key

    @classmethod
    def parse(cls, value: EntityId | str) -> EntityId:
        """Normalize a token into an EntityId.

        Args:
            value: Existing EntityId or any string-like token.

        Returns:
            EntityId with a stripped, upper-cased key.

        Raises:
            ValueError: If the token is empty after stripping.
        """
        if isinstance(value, EntityId):
            return value
        key = str(value).strip().upper()
        if not key:
            raise ValueError(f"Invalid entity id: {value!r}")
        return cls(key=key)


EntityKey = EntityId | str
"""Anything accepted where an entity id is expected."""
