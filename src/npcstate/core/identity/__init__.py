"""Entity identity: normalized ids and state name aliases."""

from npcstate.core.identity.models import EntityId, EntityKey, SwitchName, VariableName

__all__ = [
    "EntityId",
    "EntityKey",
    "VariableName",
    "SwitchName",
]
