"""Versioned snapshot codec for tracker state.

The blob is UTF-8 JSON produced by pydantic:

    {"version": 1,
     "entities": {"YUKES": {"variables": {"affection": 20}, "switches": {"alive": true}}}}

Only entity state is stored; definitions come from configuration on load.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, ValidationError

from npcstate.core import EntityId, EntityState, SnapshotError

SNAPSHOT_VERSION = 1
SUPPORTED_VERSIONS = frozenset({1})


class EntitySnapshot(BaseModel):
    """Saved variables and switches of one entity."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    variables: dict[str, StrictInt | StrictFloat] = {}
    switches: dict[str, StrictBool] = {}


class TrackerSnapshot(BaseModel):
    """Whole-tracker snapshot keyed by normalized entity id."""

    model_config = ConfigDict(extra="forbid")

    version: int = SNAPSHOT_VERSION
    entities: dict[str, EntitySnapshot] = {}


def encode_states(states: Mapping[EntityId, EntityState]) -> bytes:
    """Serialize entity states to a snapshot blob.

    Malformed stored values are written as 0/False, the same values reads
    return for them.

    Args:
        states: Tracked states keyed by EntityId.

    Returns:
        UTF-8 encoded JSON snapshot.
    """
    snapshot = TrackerSnapshot(
        entities={
            entity.key: EntitySnapshot(
                variables={name: state.variable(name) for name in state.variables},
                switches={name: state.switch(name) for name in state.switches},
            )
            for entity, state in states.items()
        }
    )
    return snapshot.model_dump_json().encode("utf-8")


def decode_snapshot(blob: bytes | str | None) -> TrackerSnapshot:
    """Parse a snapshot blob.

    A missing or empty blob (e.g. a save written before the tracker existed)
    decodes to an empty snapshot.

    Args:
        blob: Data from a previous encode_states() call, or None.

    Returns:
        Validated TrackerSnapshot.

    Raises:
        SnapshotError: If the blob is corrupt or has an unsupported version.
    """
    if not blob:
        return TrackerSnapshot()
    try:
        snapshot = TrackerSnapshot.model_validate_json(blob)
    except ValidationError as e:
        raise SnapshotError(f"Corrupt tracker snapshot: {e}") from e
    if snapshot.version not in SUPPORTED_VERSIONS:
        raise SnapshotError(f"Unsupported tracker snapshot version: {snapshot.version}")
    return snapshot
