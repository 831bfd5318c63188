"""Tests for tracker serialize/restore."""

import json

import pytest
from structlog.testing import capture_logs

from npcstate import DefinitionTable, GameSession, NPCTracker, SnapshotError
from npcstate.tracker import SNAPSHOT_VERSION, decode_snapshot


def test_restore_scenario(tracker):
    tracker.set_variable("YUKES", "affection", 20)

    restored = NPCTracker.restore(tracker.serialize())

    assert restored is not tracker
    assert restored.read_variable("YUKES", "affection") == 20


def test_restore_preserves_switches_and_floats(guard_table):
    tracker = NPCTracker(guard_table)
    tracker.toggle_switch("guard", "bribed")
    tracker.change_variable("guard", "pay", 0.25)

    restored = NPCTracker.restore(tracker.serialize(), guard_table)

    assert restored.read_switch("guard", "bribed") is True
    assert restored.read_variable("guard", "pay") == 12.75
    assert restored.read_switch("guard", "on_duty") is True


def test_restored_state_is_independent(tracker):
    tracker.set_variable("YUKES", "state", 2)
    restored = NPCTracker.restore(tracker.serialize())

    restored.set_variable("YUKES", "state", 3)

    assert tracker.read_variable("YUKES", "state") == 2


def test_blob_is_versioned_json(tracker):
    tracker.toggle_switch("VIRIDIANCITY", "OwnHouse")

    data = json.loads(tracker.serialize())

    assert data["version"] == SNAPSHOT_VERSION
    assert data["entities"] == {
        "VIRIDIANCITY": {"variables": {"state": 0}, "switches": {"OwnHouse": True}}
    }


def test_only_touched_entities_are_saved(tracker):
    assert json.loads(tracker.serialize())["entities"] == {}


@pytest.mark.parametrize("blob", [None, b"", ""])
def test_missing_blob_restores_empty_tracker(blob):
    restored = NPCTracker.restore(blob)
    assert len(restored) == 0
    assert restored.read_variable("YUKES", "affection") == 10


@pytest.mark.parametrize(
    "blob",
    [
        b"{not json",
        b'{"version": 1, "entities": {"YUKES": {"variables": {"affection": "x"}}}}',
        b'{"version": 1, "entities": [], "extra": true}',
        b'{"version": 99, "entities": {}}',
        b'{"version": 1, "entities": {"  ": {}}}',
    ],
    ids=["invalid-json", "bad-variable", "bad-shape", "future-version", "blank-id"],
)
def test_corrupt_blob_raises_snapshot_error(blob):
    with pytest.raises(SnapshotError):
        NPCTracker.restore(blob)


def test_restore_drops_entities_no_longer_defined(tracker):
    tracker.set_variable("YUKES", "state", 4)
    tracker.set_variable("VIRIDIANCITY", "state", 1)
    only_city = DefinitionTable.from_mapping({"viridiancity": {"variables": {"state": 0}}})

    with capture_logs() as logs:
        restored = NPCTracker.restore(tracker.serialize(), only_city)

    assert "YUKES" not in restored
    assert restored.read_variable("VIRIDIANCITY", "state") == 1
    assert logs[0]["event"] == "dropped_undefined_entity"


def test_decode_snapshot_accepts_str():
    snapshot = decode_snapshot('{"version": 1, "entities": {"YUKES": {}}}')
    assert list(snapshot.entities) == ["YUKES"]


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_values_are_never_saved(tracker, value):
    with capture_logs() as logs:
        tracker.set_variable("YUKES", "affection", value)

    restored = NPCTracker.restore(tracker.serialize())

    assert restored.read_variable("YUKES", "affection") == 10
    assert logs[0]["event"] == "invalid_variable_value"


def test_overflowing_change_keeps_session_loadable():
    session = GameSession.new_game()
    session.tracker.change_variable("YUKES", "affection", 1e308)
    before = session.tracker.read_variable("YUKES", "affection")

    with capture_logs() as logs:
        session.tracker.change_variable("YUKES", "affection", 1e308)

    session.load(session.save())

    assert session.tracker.read_variable("YUKES", "affection") == before
    assert logs[0]["event"] == "variable_overflow"


def test_serialize_writes_malformed_values_as_zero(tracker):
    state = tracker.get_or_create("YUKES")
    state.variables["affection"] = "broken"
    state.variables["state"] = None

    with capture_logs() as logs:
        blob = tracker.serialize()

    restored = NPCTracker.restore(blob)
    assert restored.read_variable("YUKES", "affection") == 0
    assert restored.read_variable("YUKES", "state") == 0
    assert restored.read_switch("YUKES", "alive") is True
    assert [entry["event"] for entry in logs] == ["malformed_variable", "malformed_variable"]


def test_non_finite_numbers_in_blob_are_rejected():
    blob = b'{"version": 1, "entities": {"YUKES": {"variables": {"affection": Infinity}}}}'
    with pytest.raises(SnapshotError):
        NPCTracker.restore(blob)
