"""
Specification exception hierarchy.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class SpecificationError(Exception):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidArgumentError(SpecificationError, ValueError):
    """
    A criterion, combinator or specification was misused.

    This is the only error the library raises. Kinds of misuse are told
    apart by message and by ``argument``, which names the offending
    parameter (``accessor``, ``predicate``, ``target`` or ``property``).
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "message": self.message,
            "argument": self.argument,
        }
