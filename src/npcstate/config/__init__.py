"""Configuration module using Pydantic Settings.

Usage:
    from npcstate.config import TrackerSettings

    settings = TrackerSettings(definitions_path="npcs.toml")
    table = settings.load_definitions()
"""

from npcstate.config.settings import TrackerSettings

__all__ = [
    "TrackerSettings",
]
