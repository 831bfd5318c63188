"""Core primitives: identity, definitions, state records and comparisons."""

from npcstate.core.compare import Comparison, OperatorLike, compare, parse_operator
from npcstate.core.definition import (
    DEFAULT_DEFINITIONS,
    DefinitionTable,
    EntityDefinition,
    load_definitions,
)
from npcstate.core.errors import DefinitionError, NPCStateError, SnapshotError
from npcstate.core.identity import EntityId, EntityKey, SwitchName, VariableName
from npcstate.core.state import EntityState, is_number

__all__ = [
    # Identity
    "EntityId",
    "EntityKey",
    "VariableName",
    "SwitchName",
    # Definitions
    "EntityDefinition",
    "DefinitionTable",
    "DEFAULT_DEFINITIONS",
    "load_definitions",
    # State
    "EntityState",
    "is_number",
    # Comparisons
    "Comparison",
    "OperatorLike",
    "compare",
    "parse_operator",
    # Errors
    "NPCStateError",
    "DefinitionError",
    "SnapshotError",
]
