"""Tests for static definitions and their loaders.

Critical Invariants:
- Definitions are validated when the table is built
- Ids are normalized; colliding ids are rejected
- Fresh copies never alias the template
"""

import json

import pytest
from pydantic import ValidationError

from npcstate.core import DEFAULT_DEFINITIONS, DefinitionError, DefinitionTable, load_definitions
from npcstate.core.definition import EntityDefinition


def test_default_table_matches_stock_entities():
    yukes = DEFAULT_DEFINITIONS.get("YUKES")
    assert yukes is not None
    assert yukes.variables == {"affection": 10, "state": 0}
    assert yukes.switches == {
        "alive": True,
        "unknow": True,
        "known": False,
        "friend": False,
        "enemy": False,
    }

    city = DEFAULT_DEFINITIONS.get("viridiancity")
    assert city is not None
    assert city.switches == {"OwnHouse": False}
    assert len(DEFAULT_DEFINITIONS) == 2


def test_lookup_is_case_insensitive_and_misses_return_none(guard_table):
    assert guard_table.get("GUARD") is guard_table.get("guard")
    assert guard_table.get("nobody") is None
    assert guard_table.get("") is None
    assert "Guard" in guard_table
    assert "nobody" not in guard_table
    assert 42 not in guard_table


def test_colliding_ids_are_rejected():
    with pytest.raises(DefinitionError, match="Duplicate"):
        DefinitionTable.from_mapping({"yukes": {}, "YUKES": {}})


@pytest.mark.parametrize(
    "entry",
    [
        {"variables": {"affection": "high"}},
        {"variables": {"affection": True}},
        {"switches": {"alive": 1}},
        {"variables": {}, "notes": "unexpected"},
    ],
)
def test_malformed_entries_are_rejected(entry):
    with pytest.raises(DefinitionError):
        DefinitionTable.from_mapping({"yukes": entry})


def test_non_mapping_entry_is_rejected():
    with pytest.raises(DefinitionError):
        DefinitionTable.from_mapping({"yukes": [1, 2]})


def test_non_strict_mode_ignores_extra_keys():
    table = DefinitionTable.from_mapping(
        {"yukes": {"variables": {"state": 0}, "notes": "ignored"}}, strict=False
    )
    assert table.get("yukes").variables == {"state": 0}


def test_missing_sections_default_to_empty():
    table = DefinitionTable.from_mapping({"sign": {}})
    sign = table.get("sign")
    assert sign.variables == {}
    assert sign.switches == {}


def test_definitions_are_frozen():
    definition = EntityDefinition(variables={"x": 1})
    with pytest.raises(ValidationError):
        definition.variables = {"x": 2}


def test_fresh_copies_do_not_alias_template():
    definition = DEFAULT_DEFINITIONS.get("YUKES")
    variables = definition.fresh_variables()
    switches = definition.fresh_switches()

    variables["affection"] = 999
    switches["alive"] = False

    assert definition.variables["affection"] == 10
    assert definition.switches["alive"] is True


def test_load_toml(tmp_path):
    path = tmp_path / "npcs.toml"
    path.write_text(
        "[YUKES.variables]\naffection = 3\n\n[YUKES.switches]\nalive = true\n\n[shop]\n",
        encoding="utf-8",
    )

    table = load_definitions(path)

    assert table.get("yukes").variables == {"affection": 3}
    assert table.get("yukes").switches == {"alive": True}
    assert "SHOP" in table


def test_load_json(tmp_path):
    path = tmp_path / "npcs.json"
    path.write_text(json.dumps({"guard": {"variables": {"pay": 1.5}}}), encoding="utf-8")

    table = load_definitions(path)

    assert table.get("GUARD").variables == {"pay": 1.5}


def test_load_rejects_unknown_extension(tmp_path):
    path = tmp_path / "npcs.yaml"
    path.write_text("yukes: {}", encoding="utf-8")
    with pytest.raises(DefinitionError, match="Unsupported"):
        load_definitions(path)


def test_load_reports_missing_and_corrupt_files(tmp_path):
    with pytest.raises(DefinitionError):
        load_definitions(tmp_path / "missing.toml")

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")
    with pytest.raises(DefinitionError):
        load_definitions(corrupt)

    not_a_table = tmp_path / "list.json"
    not_a_table.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(DefinitionError):
        load_definitions(not_a_table)


@pytest.mark.parametrize("value", [float("inf"), float("nan")])
def test_non_finite_defaults_are_rejected(value):
    with pytest.raises(DefinitionError):
        DefinitionTable.from_mapping({"yukes": {"variables": {"affection": value}}})


def test_contains_agrees_with_get_for_non_string_tokens():
    table = DefinitionTable.from_mapping({"5": {}})
    assert 5 in table
    assert table.get(5) is not None
    assert 6 not in table
