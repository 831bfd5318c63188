"""Comparison operators for conditional script branches."""

from __future__ import annotations

from enum import Enum


class Comparison(Enum):
    """Closed set of operators accepted by NPCTracker.evaluate()."""

    EQ = "=="  # equals
    NE = "!="  # not equals
    GT = ">"  # greater than
    LT = "<"  # less than
    GE = ">="  # greater than or equal
    LE = "<="  # less than or equal


OperatorLike = Comparison | str
