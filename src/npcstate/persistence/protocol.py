"""Save-slot protocol for the host's save system.

Each SaveValue owns one key in the host's save file and converts its value
to and from an opaque blob. The host decides where blobs are written.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class SaveValue(Protocol[T]):
    """One registered entry in a save file."""

    key: str

    def new_game_value(self) -> T:
        """Value used when starting a new game."""
        ...

    def save_value(self, value: T) -> bytes:
        """Serialize the value for writing."""
        ...

    def load_value(self, blob: bytes | None) -> T:
        """Rebuild the value from a saved blob (None if the save lacks the key)."""
        ...
