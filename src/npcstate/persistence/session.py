"""GameSession: owns the tracker across new-game, save and load.

Usage:
    session = GameSession.new_game()
    session.tracker.set_variable("YUKES", "state", 1)

    data = session.save()          # {"npc_tracker": b"..."}
    session.load(data)             # replaces the tracker wholesale
"""

from __future__ import annotations

from collections.abc import Mapping

from npcstate.config import TrackerSettings
from npcstate.core import DEFAULT_DEFINITIONS, DefinitionTable
from npcstate.logs import get_logger
from npcstate.persistence.save_value import NPCTrackerSaveValue
from npcstate.tracker import NPCTracker

logger = get_logger(__name__)


class GameSession:
    """Host-side owner of the NPC tracker.

    The tracker is handed to scripts explicitly (session.tracker) rather
    than kept in a module global.

    Args:
        definitions: Static definition table for the session's tracker.
        tracker: Existing tracker (default: a fresh one for definitions).
    """

    def __init__(
        self,
        definitions: DefinitionTable | None = None,
        tracker: NPCTracker | None = None,
    ):
        self._save_value = NPCTrackerSaveValue(
            definitions if definitions is not None else DEFAULT_DEFINITIONS
        )
        self.tracker = tracker if tracker is not None else self._save_value.new_game_value()

    @classmethod
    def new_game(cls, definitions: DefinitionTable | None = None) -> GameSession:
        """Start a session with an empty tracker."""
        return cls(definitions)

    @classmethod
    def from_settings(cls, settings: TrackerSettings | None = None) -> GameSession:
        """Start a session using the definition table named by settings.

        Raises:
            DefinitionError: If the configured definitions cannot be loaded.
        """
        settings = settings or TrackerSettings()
        return cls(settings.load_definitions())

    @property
    def definitions(self) -> DefinitionTable:
        return self._save_value.definitions

    def save(self) -> dict[str, bytes]:
        """Serialize session state, one blob per save key."""
        return {self._save_value.key: self._save_value.save_value(self.tracker)}

    def load(self, data: Mapping[str, bytes]) -> None:
        """Replace session state from save data.

        Saves written before the tracker existed have no entry for it; those
        load as a fresh tracker.

        Raises:
            SnapshotError: If the saved tracker blob is corrupt.
        """
        blob = data.get(self._save_value.key)
        if blob is None:
            logger.info("npc_tracker_missing_from_save", key=self._save_value.key)
        self.tracker = self._save_value.load_value(blob)
