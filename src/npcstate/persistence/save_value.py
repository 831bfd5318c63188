"""NPC tracker save-slot registration."""

from __future__ import annotations

from dataclasses import dataclass, field

from npcstate.core import DEFAULT_DEFINITIONS, DefinitionTable
from npcstate.tracker import NPCTracker


@dataclass(slots=True)
class NPCTrackerSaveValue:
    """Saves and loads an NPCTracker under the ``npc_tracker`` key."""

    definitions: DefinitionTable = field(default_factory=lambda: DEFAULT_DEFINITIONS)
    key: str = "npc_tracker"

    def new_game_value(self) -> NPCTracker:
        return NPCTracker(self.definitions)

    def save_value(self, value: NPCTracker) -> bytes:
        return value.serialize()

    def load_value(self, blob: bytes | None) -> NPCTracker:
        return NPCTracker.restore(blob, self.definitions)
