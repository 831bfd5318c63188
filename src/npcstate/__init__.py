"""npcstate: per-entity scripted state for RPG NPCs and locations.

Usage:
    from npcstate import GameSession, ScriptCommands

    session = GameSession.new_game()
    npc = ScriptCommands(session.tracker)

    npc.change_npc("YUKES", "affection", 5)
    if npc.check_var_npc("YUKES", "affection", ">=", 15):
        npc.switch_npc("YUKES", "friend", True)

    save_data = session.save()
    session.load(save_data)
"""

__version__ = "0.1.0"

# Core primitives
from npcstate.core import (
    DEFAULT_DEFINITIONS,
    Comparison,
    DefinitionError,
    DefinitionTable,
    EntityDefinition,
    EntityId,
    EntityState,
    NPCStateError,
    SnapshotError,
    load_definitions,
)

# Registry
from npcstate.tracker import (
    NPCTracker,
    UnknownEntity,
)

# Save/load boundary
from npcstate.persistence import (
    GameSession,
    NPCTrackerSaveValue,
    SaveValue,
)

# Script surface
from npcstate.commands import ScriptCommands

# Configuration
from npcstate.config import TrackerSettings
from npcstate.logs import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "EntityDefinition",
    "DefinitionTable",
    "DEFAULT_DEFINITIONS",
    "load_definitions",
    "EntityState",
    "Comparison",
    # Errors
    "NPCStateError",
    "DefinitionError",
    "SnapshotError",
    # Registry
    "NPCTracker",
    "UnknownEntity",
    # Persistence
    "SaveValue",
    "NPCTrackerSaveValue",
    "GameSession",
    # Scripts
    "ScriptCommands",
    # Config and logging
    "TrackerSettings",
    "configure_logging",
    "get_logger",
]
