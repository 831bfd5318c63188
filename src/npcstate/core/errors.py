"""Exception hierarchy.

Play-time operations never raise these; they only surface while loading
configuration or save data.
"""


class NPCStateError(Exception):
    """Base class for npcstate errors."""

    pass


class DefinitionError(NPCStateError):
    """Raised when a static definition table is invalid."""

    pass


class SnapshotError(NPCStateError):
    """Raised when a saved tracker snapshot cannot be decoded."""

    pass
