from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .exceptions import InvalidArgumentError

T = TypeVar("T", contravariant=True)

PredicateLike = Callable[[Any], bool]


def require_predicate(predicate: Any) -> PredicateLike:
    """Reject ``None`` and non-callable predicates."""
    if predicate is None:
        raise InvalidArgumentError("Predicate should not be null", argument="predicate")
    if not callable(predicate):
        raise InvalidArgumentError(
            f"Predicate must be callable, got {type(predicate).__name__}",
            argument="predicate",
        )
    return predicate


def require_predicates(predicates: tuple[Any, ...]) -> tuple[PredicateLike, ...]:
    """Validate every predicate before any of them is used."""
    return tuple(require_predicate(p) for p in predicates)


class Predicate(Generic[T], ABC):
    """Base class for predicates with logic operator support."""

    @abstractmethod
    def test(self, candidate: T) -> bool:
        """Evaluate the predicate against *candidate*."""
        ...

    def __call__(self, candidate: T) -> bool:
        return self.test(candidate)

    def __and__(self, other: PredicateLike) -> AndPredicate[T]:
        return AndPredicate(self, other)

    def __or__(self, other: PredicateLike) -> OrPredicate[T]:
        return OrPredicate(self, other)

    def __invert__(self) -> NotPredicate[T]:
        return NotPredicate(self)


class AndPredicate(Predicate[T]):
    """
    Logical AND composite predicate.

    Children are evaluated left to right and evaluation stops at the
    first false one. With no children the predicate is always false.
    """

    def __init__(self, *predicates: PredicateLike) -> None:
        self.predicates = require_predicates(predicates)

    def test(self, candidate: T) -> bool:
        if not self.predicates:
            return False
        return all(p(candidate) for p in self.predicates)

    def __repr__(self) -> str:
        return f"and_({', '.join(map(repr, self.predicates))})"


class OrPredicate(Predicate[T]):
    """
    Logical OR composite predicate.

    Children are evaluated left to right and evaluation stops at the
    first true one. With no children the predicate is always true.
    """

    def __init__(self, *predicates: PredicateLike) -> None:
        self.predicates = require_predicates(predicates)

    def test(self, candidate: T) -> bool:
        if not self.predicates:
            return True
        return any(p(candidate) for p in self.predicates)

    def __repr__(self) -> str:
        return f"or_({', '.join(map(repr, self.predicates))})"


class NotPredicate(Predicate[T]):
    """Logical NOT composite predicate."""

    def __init__(self, predicate: PredicateLike) -> None:
        self.predicate = require_predicate(predicate)

    def test(self, candidate: T) -> bool:
        return not self.predicate(candidate)

    def __repr__(self) -> str:
        return f"not_({self.predicate!r})"
