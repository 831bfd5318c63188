"""The NPC state registry and its snapshot codec."""

from npcstate.tracker.result import UnknownEntity
from npcstate.tracker.snapshot import (
    SNAPSHOT_VERSION,
    EntitySnapshot,
    TrackerSnapshot,
    decode_snapshot,
    encode_states,
)
from npcstate.tracker.tracker import NPCTracker

__all__ = [
    "NPCTracker",
    "UnknownEntity",
    "SNAPSHOT_VERSION",
    "EntitySnapshot",
    "TrackerSnapshot",
    "encode_states",
    "decode_snapshot",
]
