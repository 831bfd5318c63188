"""Definition loading from files and the stock table.

Usage:
    table = load_definitions("npcs.toml")
    table = DEFAULT_DEFINITIONS
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

from npcstate.core.definition.models import DefinitionTable
from npcstate.core.errors import DefinitionError

DEFAULT_DEFINITIONS = DefinitionTable.from_mapping(
    {
        "YUKES": {
            "variables": {"affection": 10, "state": 0},
            "switches": {
                "alive": True,
                "unknow": True,
                "known": False,
                "friend": False,
                "enemy": False,
            },
        },
        "VIRIDIANCITY": {
            "variables": {"state": 0},
            "switches": {"OwnHouse": False},
        },
    }
)
"""Stock definitions: one NPC (Yukes) and one location (Viridian City)."""


def load_definitions(path: str | Path, strict: bool = True) -> DefinitionTable:
    """Load a definition table from a TOML or JSON file.

    The file holds one table per entity id, each with optional
    ``variables`` and ``switches`` sub-tables.

    Args:
        path: Path to a .toml or .json file.
        strict: Reject unknown keys inside entity tables.

    Returns:
        Validated DefinitionTable.

    Raises:
        DefinitionError: If the file is unreadable, has an unsupported
            extension, or contains invalid definitions.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        elif suffix == ".json":
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        else:
            raise DefinitionError(f"Unsupported definition file type: {path.name}")
    except (OSError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise DefinitionError(f"Could not read definitions from {path}: {e}") from e

    if not isinstance(data, dict):
        raise DefinitionError(f"Definition file {path} must contain a table of entities")
    return DefinitionTable.from_mapping(data, strict=strict)
