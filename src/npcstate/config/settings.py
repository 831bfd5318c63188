"""Configuration settings using Pydantic Settings.

Usage:
    from npcstate.config import TrackerSettings

    # Load from environment variables (NPCSTATE_*)
    settings = TrackerSettings()

    # Or override with explicit values
    settings = TrackerSettings(definitions_path="data/npcs.toml")
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from npcstate.core import DEFAULT_DEFINITIONS, DefinitionTable, load_definitions


class TrackerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the NPC tracker.

    Attributes:
        definitions_path: TOML/JSON definition file (None for the built-in table).
        strict_definitions: Reject unknown keys inside definition entries.
        log_level: Level passed to configure_logging() by hosts that opt in.

    Environment Variables:
        NPCSTATE_DEFINITIONS_PATH
        NPCSTATE_STRICT_DEFINITIONS
        NPCSTATE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="NPCSTATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    definitions_path: Path | None = None
    strict_definitions: bool = True
    log_level: str = "INFO"

    def load_definitions(self) -> DefinitionTable:
        """Load the configured definition table.

        Raises:
            DefinitionError: If the configured file is missing or invalid.
        """
        if self.definitions_path is None:
            return DEFAULT_DEFINITIONS
        return load_definitions(self.definitions_path, strict=self.strict_definitions)
