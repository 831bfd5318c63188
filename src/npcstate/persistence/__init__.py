"""Host save/load boundary: save-slot protocol and the game session."""

from npcstate.persistence.protocol import SaveValue
from npcstate.persistence.save_value import NPCTrackerSaveValue
from npcstate.persistence.session import GameSession

__all__ = [
    "SaveValue",
    "NPCTrackerSaveValue",
    "GameSession",
]
