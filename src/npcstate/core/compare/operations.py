"""Operator parsing and evaluation."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from npcstate.core.compare.models import Comparison, OperatorLike

_OPERATIONS: dict[Comparison, Callable[[Any, Any], bool]] = {
    Comparison.EQ: operator.eq,
    Comparison.NE: operator.ne,
    Comparison.GT: operator.gt,
    Comparison.LT: operator.lt,
    Comparison.GE: operator.ge,
    Comparison.LE: operator.le,
}


def parse_operator(op: OperatorLike | object) -> Comparison | None:
    """Resolve an operator token to a Comparison.

    Accepts a Comparison, its symbol ("==", ">=", ...) or its name
    ("EQ", "ge", ...). Anything else resolves to None.

    Args:
        op: Operator token.

    Returns:
        Matching Comparison, or None if the token is not supported.
    """
    if isinstance(op, Comparison):
        return op
    if not isinstance(op, str):
        return None
    token = op.strip()
    try:
        return Comparison(token)
    except ValueError:
        return Comparison.__members__.get(token.upper())


def compare(op: Comparison, left: int | float, right: int | float) -> bool:
    """Apply op to two numbers with native comparison semantics."""
    return bool(_OPERATIONS[op](left, right))
