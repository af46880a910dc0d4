"""
Criteria: predicate builders bound to one property accessor.

Example::

    by_age = Criterion.of(lambda user: user.age)
    adults = by_age.ge(18)
    adults(User(name="Alice", age=43))  # True

Null handling differs between equality and ordering:

* ``eq`` treats ``None`` as an ordinary value on either side, so
  ``eq(None)`` asks whether the property is absent.
* ``lt`` / ``le`` / ``gt`` / ``ge`` / ``compare`` reject a ``None``
  target when the predicate is *evaluated* (a caller bug), but return
  ``False`` for a record whose property is ``None`` (missing data).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from .accessors import as_accessor, describe_accessor
from .base import Predicate
from .evaluator import ordered_relation
from .exceptions import InvalidArgumentError
from .operators import ComparisonOperator

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Relation = Callable[[Any, Any], bool]

_NOT_COMPARABLE = (
    "Property type is not comparable or value cannot cast to the type of "
    "property for comparing"
)


def _evaluate_ordered(
    accessor: Callable[[Any], Any],
    candidate: Any,
    target: Any,
    relation: Relation,
) -> bool:
    if target is None:
        raise InvalidArgumentError("Cannot compare property to null", argument="target")
    value = accessor(candidate)
    if value is None:
        return False
    try:
        return bool(relation(value, target))
    except TypeError as exc:
        raise InvalidArgumentError(_NOT_COMPARABLE, argument="property") from exc


class ComparisonPredicate(Predicate[T]):
    """Compares the property read by a criterion with a fixed target."""

    def __init__(
        self,
        criterion: Criterion[T, Any],
        op: ComparisonOperator | str,
        target: Any,
    ) -> None:
        try:
            self.op = ComparisonOperator(op)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown comparison operator: {op!r}", argument="op"
            ) from exc
        self.criterion = criterion
        self.target = target

    def test(self, candidate: T) -> bool:
        accessor = self.criterion.accessor
        if not self.op.is_ordered:
            return bool(accessor(candidate) == self.target)
        return _evaluate_ordered(
            accessor, candidate, self.target, ordered_relation(self.op)
        )

    def __repr__(self) -> str:
        return (
            f"{describe_accessor(self.criterion.accessor)} "
            f"{self.op.value} {self.target!r}"
        )


class RelationPredicate(Predicate[T]):
    """Applies a caller-supplied ordered relation to the property and a target."""

    def __init__(
        self,
        criterion: Criterion[T, Any],
        relation: Relation,
        target: Any,
    ) -> None:
        self.criterion = criterion
        self.relation = relation
        self.target = target

    def test(self, candidate: T) -> bool:
        return _evaluate_ordered(
            self.criterion.accessor, candidate, self.target, self.relation
        )

    def __repr__(self) -> str:
        name = getattr(self.relation, "__qualname__", repr(self.relation))
        accessor = describe_accessor(self.criterion.accessor)
        return f"{name}({accessor}, {self.target!r})"


class Criterion(BaseModel, Generic[T, R]):
    """
    Immutable handle on one property accessor.

    Build instances with :meth:`of`; it validates the accessor and
    accepts dotted attribute paths as well as callables.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    accessor: Callable[[Any], Any]

    @classmethod
    def of(cls, accessor: Callable[[T], R] | str) -> Criterion[T, R]:
        """
        Create a criterion for *accessor*.

        Raises:
            InvalidArgumentError: If *accessor* is ``None`` or not callable.
        """
        criterion = cls(accessor=as_accessor(accessor))
        logger.debug("Created criterion on %s", describe_accessor(criterion.accessor))
        return criterion

    def get(self, target: T) -> R:
        """Return the property value of *target*, ``None`` included."""
        return self.accessor(target)

    # -- equality --------------------------------------------------------

    def eq(self, target: R | None) -> ComparisonPredicate[T]:
        """Predicate: property equals *target* (``None`` equals ``None``)."""
        return ComparisonPredicate(self, ComparisonOperator.EQ, target)

    # -- ordering --------------------------------------------------------

    def lt(self, target: Any) -> ComparisonPredicate[T]:
        """Predicate: property is strictly below *target*."""
        return ComparisonPredicate(self, ComparisonOperator.LT, target)

    def le(self, target: Any) -> ComparisonPredicate[T]:
        """Predicate: property is below or equal to *target*."""
        return ComparisonPredicate(self, ComparisonOperator.LE, target)

    def gt(self, target: Any) -> ComparisonPredicate[T]:
        """Predicate: property is strictly above *target*."""
        return ComparisonPredicate(self, ComparisonOperator.GT, target)

    def ge(self, target: Any) -> ComparisonPredicate[T]:
        """Predicate: property is above or equal to *target*."""
        return ComparisonPredicate(self, ComparisonOperator.GE, target)

    def compare(self, relation: Relation, target: Any) -> RelationPredicate[T]:
        """
        Predicate: ``relation(property, target)`` holds.

        Shares the null and comparability rules of the ordered builders:
        a ``None`` target raises on evaluation, a ``None`` property yields
        ``False`` without calling *relation*, and a ``TypeError`` from
        *relation* is reported as :class:`InvalidArgumentError`.

        Raises:
            InvalidArgumentError: If *relation* is ``None`` or not callable.
        """
        if relation is None or not callable(relation):
            raise InvalidArgumentError(
                "Relation should be a callable", argument="relation"
            )
        return RelationPredicate(self, relation, target)
