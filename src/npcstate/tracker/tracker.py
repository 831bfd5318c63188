"""NPCTracker: runtime registry of per-entity variables and switches.

Usage:
    tracker = NPCTracker(DEFAULT_DEFINITIONS)

    tracker.change_variable("YUKES", "affection", 5)
    tracker.evaluate("YUKES", "affection", ">=", 14)  # True

    tracker.toggle_switch("VIRIDIANCITY", "OwnHouse")
    tracker.read_switch("VIRIDIANCITY", "OwnHouse")  # True

    blob = tracker.serialize()
    restored = NPCTracker.restore(blob, DEFAULT_DEFINITIONS)

Ids without a static definition never raise: reads return 0/False, writes
are skipped, and a warning is logged.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from npcstate.core import (
    DEFAULT_DEFINITIONS,
    DefinitionTable,
    EntityId,
    EntityKey,
    EntityState,
    OperatorLike,
    SnapshotError,
    SwitchName,
    VariableName,
    compare,
    is_number,
    parse_operator,
)
from npcstate.logs import get_logger
from npcstate.tracker.result import UnknownEntity
from npcstate.tracker.snapshot import decode_snapshot, encode_states

logger = get_logger(__name__)


class NPCTracker:
    """Maps defined entity ids to their current EntityState.

    State is created lazily from the definition table the first time an id is
    requested and lives until the tracker is discarded.

    Args:
        definitions: Static definition table (default: DEFAULT_DEFINITIONS).
    """

    def __init__(self, definitions: DefinitionTable | None = None):
        self._definitions = definitions if definitions is not None else DEFAULT_DEFINITIONS
        self._states: dict[EntityId, EntityState] = {}

    @property
    def definitions(self) -> DefinitionTable:
        return self._definitions

    def get_or_create(self, entity: EntityKey) -> EntityState | UnknownEntity:
        """Resolve an id to its state, creating it from defaults on first access.

        Args:
            entity: Entity id token, matched case-insensitively.

        Returns:
            The entity's EntityState, or UnknownEntity if it has no definition.
        """
        try:
            entity_id = EntityId.parse(entity)
        except ValueError:
            logger.warning("npc_not_defined", entity=repr(entity))
            return UnknownEntity(key=str(entity))

        definition = self._definitions.get(entity_id)
        if definition is None:
            logger.warning("npc_not_defined", entity=entity_id.key)
            return UnknownEntity(key=entity_id.key)

        state = self._states.get(entity_id)
        if state is None:
            state = EntityState.from_definition(entity_id, definition)
            self._states[entity_id] = state
        return state

    def exists_definition(self, entity: EntityKey) -> bool:
        """Check the definition table only. Never creates state."""
        return entity in self._definitions

    # Reads

    def read_variable(self, entity: EntityKey, name: VariableName) -> int | float:
        """Current value of a variable, 0 if unset or the entity is unknown."""
        state = self.get_or_create(entity)
        if isinstance(state, UnknownEntity):
            return 0
        return state.variable(name)

    def read_switch(self, entity: EntityKey, name: SwitchName) -> bool:
        """Current value of a switch, False if unset or the entity is unknown."""
        state = self.get_or_create(entity)
        if isinstance(state, UnknownEntity):
            return False
        return state.switch(name)

    # Writes

    def set_variable(self, entity: EntityKey, name: VariableName, value: int | float) -> None:
        if not is_number(value):
            logger.warning("invalid_variable_value", entity=str(entity), variable=name, value=value)
            return
        state = self.get_or_create(entity)
        if isinstance(state, EntityState):
            state.set_variable(name, value)

    def set_switch(self, entity: EntityKey, name: SwitchName, value: bool) -> None:
        if not isinstance(value, bool):
            logger.warning("invalid_switch_value", entity=str(entity), switch=name, value=value)
            return
        state = self.get_or_create(entity)
        if isinstance(state, EntityState):
            state.set_switch(name, value)

    def change_variable(self, entity: EntityKey, name: VariableName, delta: int | float) -> None:
        """Add delta to a variable (negative to subtract)."""
        if not is_number(delta):
            logger.warning("invalid_variable_delta", entity=str(entity), variable=name, delta=delta)
            return
        state = self.get_or_create(entity)
        if isinstance(state, EntityState):
            state.change_variable(name, delta)

    def toggle_switch(self, entity: EntityKey, name: SwitchName) -> None:
        state = self.get_or_create(entity)
        if isinstance(state, EntityState):
            state.toggle_switch(name)

    def reset(self, entity: EntityKey) -> None:
        """Restore an entity's variables and switches to its static defaults."""
        state = self.get_or_create(entity)
        if isinstance(state, UnknownEntity):
            return
        definition = self._definitions.get(state.id)
        if definition is not None:
            state.reset_to(definition)

    # Queries

    def evaluate(
        self,
        entity: EntityKey,
        name: VariableName,
        op: OperatorLike,
        value: int | float,
    ) -> bool:
        """Compare a variable against a literal value.

        Unknown entities read as 0. Unsupported operators and non-numeric
        values evaluate to False.

        Args:
            entity: Entity id token.
            name: Variable to read.
            op: Comparison, symbol ("==", ">=", ...) or name ("EQ", "GE", ...).
            value: Number to compare against.

        Returns:
            Result of ``variable <op> value``.
        """
        comparison = parse_operator(op)
        if comparison is None:
            logger.warning("unsupported_operator", entity=str(entity), operator=repr(op))
            return False
        if not is_number(value):
            logger.warning("invalid_comparison_value", entity=str(entity), value=repr(value))
            return False
        return compare(comparison, self.read_variable(entity, name), value)

    def entity_ids(self) -> Iterator[EntityId]:
        """Iterate ids that currently have state."""
        return iter(list(self._states))

    def __contains__(self, entity: Any) -> bool:
        try:
            return EntityId.parse(entity) in self._states
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._states)

    # Persistence

    def serialize(self) -> bytes:
        """Snapshot all tracked state as a versioned blob.

        Returns:
            UTF-8 JSON bytes; see npcstate.tracker.snapshot for the layout.
        """
        return encode_states(self._states)

    @classmethod
    def restore(
        cls, blob: bytes | str | None, definitions: DefinitionTable | None = None
    ) -> NPCTracker:
        """Rebuild a tracker from a serialize() blob.

        A missing blob gives a fresh, empty tracker. Saved entities that are no
        longer defined are dropped.

        Args:
            blob: Data from serialize(), or None.
            definitions: Definition table for the new tracker.

        Returns:
            New NPCTracker holding the saved state.

        Raises:
            SnapshotError: If the blob is corrupt or from an unsupported version.
        """
        snapshot = decode_snapshot(blob)
        tracker = cls(definitions)
        for key, saved in snapshot.entities.items():
            try:
                entity_id = EntityId.parse(key)
            except ValueError as e:
                raise SnapshotError(f"Corrupt tracker snapshot: {e}") from e
            if entity_id not in tracker._definitions:
                logger.warning("dropped_undefined_entity", entity=entity_id.key)
                continue
            tracker._states[entity_id] = EntityState(
                id=entity_id,
                variables=dict(saved.variables),
                switches=dict(saved.switches),
            )
        return tracker

    def __repr__(self) -> str:
        return f"NPCTracker(entities={sorted(e.key for e in self._states)!r})"
