"""
Property accessors.

An accessor is any callable taking a record and returning one of its
properties. Dotted attribute paths (``"owner.name"``) are accepted
wherever an accessor is and are turned into :class:`AttributeAccessor`
instances.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import InvalidArgumentError


def resolve_path(obj: Any, attr_path: str) -> Any:
    """
    Resolve a dot-separated attribute path on *obj*.

    Mapping keys and attributes are both supported. A missing link or a
    ``None`` intermediate value resolves the whole path to ``None``.
    """
    for part in attr_path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, Mapping) else getattr(obj, part, None)
    return obj


class AttributeAccessor:
    """Accessor reading a dotted attribute path from its argument."""

    __slots__ = ("path",)

    def __init__(self, path: str) -> None:
        if not path or any(not part for part in path.split(".")):
            raise InvalidArgumentError(
                f"Invalid attribute path: {path!r}", argument="accessor"
            )
        self.path = path

    def __call__(self, obj: Any) -> Any:
        return resolve_path(obj, self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeAccessor):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash((AttributeAccessor, self.path))

    def __repr__(self) -> str:
        return f"attribute({self.path!r})"


def attribute(path: str) -> AttributeAccessor:
    """Shortcut for ``AttributeAccessor(path)``."""
    return AttributeAccessor(path)


def as_accessor(accessor: Callable[[Any], Any] | str | None) -> Callable[[Any], Any]:
    """
    Normalise *accessor* into a callable.

    Raises:
        InvalidArgumentError: If *accessor* is ``None`` or neither a
            string nor callable.
    """
    if accessor is None:
        raise InvalidArgumentError(
            "Property accessor should not be null", argument="accessor"
        )
    if isinstance(accessor, str):
        return AttributeAccessor(accessor)
    if not callable(accessor):
        raise InvalidArgumentError(
            f"Property accessor must be callable or an attribute path, "
            f"got {type(accessor).__name__}",
            argument="accessor",
        )
    return accessor


def describe_accessor(accessor: Callable[[Any], Any]) -> str:
    """Short human-readable name of *accessor* for reprs and log records."""
    if isinstance(accessor, AttributeAccessor):
        return accessor.path
    return getattr(accessor, "__qualname__", None) or repr(accessor)
