"""Static definition models.

Definitions are validated once, when the table is built, and never mutated
afterwards. Runtime state always starts from fresh copies of them.

Usage:
    table = DefinitionTable.from_mapping(
        {"YUKES": {"variables": {"affection": 10}, "switches": {"alive": True}}}
    )
    table.get("yukes").variables  # {"affection": 10}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, ValidationError

from npcstate.core.errors import DefinitionError
from npcstate.core.identity import EntityId, EntityKey, SwitchName, VariableName

Number = StrictInt | StrictFloat

_DEFINITION_FIELDS = ("variables", "switches")


class EntityDefinition(BaseModel):
    """Default variables and switches for one entity id."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    variables: dict[VariableName, Number] = {}
    switches: dict[SwitchName, StrictBool] = {}

    def fresh_variables(self) -> dict[VariableName, int | float]:
        """Independent copy of the default variables."""
        return dict(self.variables)

    def fresh_switches(self) -> dict[SwitchName, bool]:
        """Independent copy of the default switches."""
        return dict(self.switches)


class DefinitionTable:
    """Immutable mapping of EntityId to EntityDefinition.

    Lookups accept any EntityKey and normalize it, so "yukes" and "YUKES"
    resolve to the same definition.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Mapping[EntityId, EntityDefinition] | None = None):
        self._definitions: Mapping[EntityId, EntityDefinition] = MappingProxyType(
            dict(definitions or {})
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], strict: bool = True) -> DefinitionTable:
        """Build a table from plain data (parsed TOML/JSON or a literal dict).

        Args:
            mapping: Entity key -> {"variables": {...}, "switches": {...}}.
            strict: Reject keys other than variables/switches in an entry.
                When False those keys are ignored.

        Returns:
            Validated DefinitionTable.

        Raises:
            DefinitionError: If an entry is malformed or two keys collide
                after normalization.
        """
        definitions: dict[EntityId, EntityDefinition] = {}
        for raw_key, raw_entry in mapping.items():
            try:
                entity = EntityId.parse(raw_key)
            except ValueError as e:
                raise DefinitionError(str(e)) from e
            if entity in definitions:
                raise DefinitionError(f"Duplicate definition for {entity} (from {raw_key!r})")
            if not isinstance(raw_entry, Mapping):
                raise DefinitionError(f"Definition for {entity} must be a table, got {raw_entry!r}")
            entry = raw_entry
            if not strict:
                entry = {k: raw_entry[k] for k in _DEFINITION_FIELDS if k in raw_entry}
            try:
                definitions[entity] = EntityDefinition.model_validate(entry)
            except ValidationError as e:
                raise DefinitionError(f"Invalid definition for {entity}: {e}") from e
        return cls(definitions)

    def get(self, entity: EntityKey) -> EntityDefinition | None:
        """Look up the definition for an entity, or None if undefined."""
        try:
            return self._definitions.get(EntityId.parse(entity))
        except ValueError:
            return None

    def ids(self) -> frozenset[EntityId]:
        return frozenset(self._definitions)

    def __contains__(self, entity: Any) -> bool:
        return self.get(entity) is not None

    def __iter__(self) -> Iterator[EntityId]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"DefinitionTable({sorted(e.key for e in self._definitions)!r})"
