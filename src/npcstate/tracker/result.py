"""Lookup results that are not entity state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UnknownEntity:
    """Returned instead of EntityState when an id has no static definition.

    Callers treat it as "do nothing": reads fall back to zero values and
    writes are skipped. It is never raised.
    """

    key: str
