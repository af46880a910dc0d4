"""
Ordered comparison strategy.

Every ordered operator shares one algorithm and differs only in the
relation applied to the property value and the target. Relations are
Python's rich comparisons, so values that are unordered with respect to
each other (``nan`` against any float) satisfy none of them.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from .operators import ComparisonOperator

if TYPE_CHECKING:
    from collections.abc import Callable


ORDERED_RELATIONS: dict[ComparisonOperator, Callable[[Any, Any], bool]] = {
    ComparisonOperator.LT: operator.lt,
    ComparisonOperator.LE: operator.le,
    ComparisonOperator.GT: operator.gt,
    ComparisonOperator.GE: operator.ge,
}


def ordered_relation(op: ComparisonOperator) -> Callable[[Any, Any], bool]:
    """
    Look up the relation applied to ``(property_value, target)`` for *op*.

    Relations raise ``TypeError`` when the two values are not mutually
    orderable.

    Raises:
        ValueError: If *op* is not an ordered operator.
    """
    relation = ORDERED_RELATIONS.get(op)
    if relation is None:
        raise ValueError(f"Unsupported operator for ordered comparison: {op}")
    return relation
