"""Comparison operators and evaluation."""

from npcstate.core.compare.models import Comparison, OperatorLike
from npcstate.core.compare.operations import compare, parse_operator

__all__ = [
    "Comparison",
    "OperatorLike",
    "compare",
    "parse_operator",
]
