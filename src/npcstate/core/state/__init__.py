"""Mutable entity state records."""

from npcstate.core.state.models import EntityState, is_number

__all__ = [
    "EntityState",
    "is_number",
]
