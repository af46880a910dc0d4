"""Specification: a predicate treated as a named business rule."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .base import AndPredicate, NotPredicate, OrPredicate, PredicateLike
from .exceptions import InvalidArgumentError

T = TypeVar("T")


class Specification(BaseModel, Generic[T]):
    """
    Immutable wrapper exposing a predicate as ``match``.

    ``Specification.of(None)`` is accepted; the missing predicate is
    only reported when :meth:`match` is called.

    Usage::

        adults = Specification.of(Criterion.of("age").ge(18))
        adults.match(alice)
        list(adults.filter(users))
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    predicate: Callable[[Any], bool] | None = None

    @classmethod
    def of(cls, predicate: PredicateLike | None) -> Specification[T]:
        """
        Wrap *predicate* in a specification.

        Raises:
            InvalidArgumentError: If *predicate* is neither ``None`` nor
                callable.
        """
        try:
            return cls(predicate=predicate)
        except PydanticValidationError as exc:
            raise InvalidArgumentError(
                f"Predicate must be callable, got {type(predicate).__name__}",
                argument="predicate",
            ) from exc

    def match(self, value: T) -> bool:
        """Return whether *value* satisfies the wrapped predicate."""
        if self.predicate is None:
            raise InvalidArgumentError(
                "Predicate should not be null", argument="predicate"
            )
        return bool(self.predicate(value))

    def __call__(self, value: T) -> bool:
        return self.match(value)

    def filter(self, values: Iterable[T]) -> Iterator[T]:
        """Yield the items of *values* that match, in order."""
        return (value for value in values if self.match(value))

    # -- composition -----------------------------------------------------

    def __and__(self, other: PredicateLike) -> Specification[T]:
        return Specification.of(AndPredicate(self, other))

    def __or__(self, other: PredicateLike) -> Specification[T]:
        return Specification.of(OrPredicate(self, other))

    def __invert__(self) -> Specification[T]:
        return Specification.of(NotPredicate(self))
