"""Static entity definitions: immutable defaults keyed by EntityId."""

from npcstate.core.definition.loader import DEFAULT_DEFINITIONS, load_definitions
from npcstate.core.definition.models import DefinitionTable, EntityDefinition

__all__ = [
    "EntityDefinition",
    "DefinitionTable",
    "DEFAULT_DEFINITIONS",
    "load_definitions",
]
