"""Tests for exceptions module."""

from __future__ import annotations

import pytest

from predicate_specifications import Criterion, and_
from predicate_specifications.exceptions import (
    InvalidArgumentError,
    SpecificationError,
)


def test_invalid_argument_to_dict():
    err = InvalidArgumentError("Predicate should not be null", argument="predicate")
    assert err.to_dict() == {
        "error": "INVALID_ARGUMENT",
        "message": "Predicate should not be null",
        "argument": "predicate",
    }


def test_invalid_argument_without_argument_name():
    err = InvalidArgumentError("Something broke")
    assert err.argument is None
    assert err.to_dict()["argument"] is None
    assert str(err) == "Something broke"


def test_base_error_to_dict():
    err = SpecificationError("boom")
    assert err.to_dict() == {"error": "SpecificationError", "message": "boom"}


def test_hierarchy():
    assert issubclass(InvalidArgumentError, SpecificationError)
    assert issubclass(InvalidArgumentError, ValueError)


@pytest.mark.parametrize(
    ("trigger", "argument"),
    [
        (lambda: Criterion.of(None), "accessor"),
        (lambda: and_(None), "predicate"),
        (lambda: Criterion.of("age").lt(None)(object()), "target"),
        (lambda: Criterion.of(lambda _: "x").lt(1)(object()), "property"),
    ],
)
def test_every_misuse_raises_invalid_argument(trigger, argument):
    with pytest.raises(InvalidArgumentError) as exc_info:
        trigger()
    assert exc_info.value.argument == argument


def test_invalid_argument_caught_as_value_error():
    with pytest.raises(ValueError):
        Criterion.of(None)
