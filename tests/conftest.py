"""Shared test fixtures."""

import pytest

from npcstate import DEFAULT_DEFINITIONS, DefinitionTable, NPCTracker


@pytest.fixture
def definitions() -> DefinitionTable:
    """Stock definition table (YUKES, VIRIDIANCITY)."""
    return DEFAULT_DEFINITIONS


@pytest.fixture
def tracker(definitions: DefinitionTable) -> NPCTracker:
    """Fresh, empty tracker over the stock definitions."""
    return NPCTracker(definitions)


@pytest.fixture
def guard_table() -> DefinitionTable:
    """Small custom table with an int and a float variable."""
    return DefinitionTable.from_mapping(
        {
            "guard": {
                "variables": {"suspicion": 0, "pay": 12.5},
                "switches": {"bribed": False, "on_duty": True},
            },
        }
    )
