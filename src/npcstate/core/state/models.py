"""Mutable per-entity state.

EntityState is owned by the tracker; scripts go through NPCTracker so that
unknown ids and malformed values are handled in one place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from npcstate.core.definition import EntityDefinition
from npcstate.core.identity import EntityId, SwitchName, VariableName
from npcstate.logs import get_logger

logger = get_logger(__name__)


def is_number(value: Any) -> bool:
    """True for int and finite float values; bools are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


@dataclass(slots=True)
class EntityState:
    """Runtime variables and switches of one defined entity."""

    id: EntityId
    variables: dict[VariableName, int | float] = field(default_factory=dict)
    switches: dict[SwitchName, bool] = field(default_factory=dict)

    @classmethod
    def from_definition(cls, entity: EntityId, definition: EntityDefinition) -> EntityState:
        """Create state seeded with fresh copies of the definition's defaults."""
        state = cls(id=entity)
        state.reset_to(definition)
        return state

    def reset_to(self, definition: EntityDefinition) -> None:
        """Replace all variables and switches with the definition's defaults."""
        self.variables = definition.fresh_variables()
        self.switches = definition.fresh_switches()

    def variable(self, name: VariableName) -> int | float:
        """Stored value of a variable, 0 if unset or not numeric."""
        value = self.variables.get(name, 0)
        if not is_number(value):
            logger.warning(
                "malformed_variable", entity=self.id.key, variable=name, value=repr(value)
            )
            return 0
        return value

    def switch(self, name: SwitchName) -> bool:
        """Stored value of a switch, False if unset."""
        return bool(self.switches.get(name, False))

    def set_variable(self, name: VariableName, value: int | float) -> None:
        self.variables[name] = value

    def set_switch(self, name: SwitchName, value: bool) -> None:
        self.switches[name] = value

    def change_variable(self, name: VariableName, delta: int | float) -> None:
        """Add delta to a variable. A missing or non-numeric value counts as 0."""
        current = self.variables.get(name)
        if not is_number(current):
            if current is not None:
                logger.warning(
                    "malformed_variable", entity=self.id.key, variable=name, value=repr(current)
                )
            current = 0
        try:
            result = current + delta
        except OverflowError:
            result = math.inf
        if not is_number(result):
            logger.warning(
                "variable_overflow", entity=self.id.key, variable=name, delta=repr(delta)
            )
            return
        self.variables[name] = result

    def toggle_switch(self, name: SwitchName) -> None:
        """Flip a switch. An unset switch counts as False, so it becomes True."""
        self.switches[name] = not self.switches.get(name, False)
