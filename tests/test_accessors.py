"""Tests for attribute-path accessors."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from predicate_specifications import (
    AttributeAccessor,
    Criterion,
    InvalidArgumentError,
    attribute,
    resolve_path,
)


@dataclass(frozen=True)
class Address:
    city: str | None


@dataclass(frozen=True)
class Customer:
    name: str
    address: Address | None


@pytest.fixture
def customer() -> Customer:
    return Customer(name="Alice", address=Address(city="Athens"))


def test_resolve_simple_attribute(customer: Customer):
    assert resolve_path(customer, "name") == "Alice"


def test_resolve_nested_attribute(customer: Customer):
    assert resolve_path(customer, "address.city") == "Athens"


def test_resolve_through_none():
    assert resolve_path(Customer(name="Bob", address=None), "address.city") is None


def test_resolve_missing_attribute(customer: Customer):
    assert resolve_path(customer, "email") is None


def test_resolve_mapping_keys():
    data = {"owner": {"name": "Alice"}}
    assert resolve_path(data, "owner.name") == "Alice"
    assert resolve_path(data, "owner.age") is None


def test_resolve_mixed_mapping_and_attributes(customer: Customer):
    assert resolve_path({"customer": customer}, "customer.address.city") == "Athens"


def test_attribute_accessor_is_callable(customer: Customer):
    accessor = attribute("address.city")
    assert isinstance(accessor, AttributeAccessor)
    assert accessor(customer) == "Athens"
    assert repr(accessor) == "attribute('address.city')"


def test_attribute_accessor_equality():
    assert attribute("name") == AttributeAccessor("name")
    assert attribute("name") != attribute("age")
    assert hash(attribute("name")) == hash(attribute("name"))


@pytest.mark.parametrize("path", ["", ".", "address.", ".city"])
def test_attribute_accessor_rejects_malformed_paths(path):
    with pytest.raises(InvalidArgumentError):
        attribute(path)


def test_criteria_from_equal_paths_are_equal():
    assert Criterion.of("address.city") == Criterion.of("address.city")


def test_null_link_excluded_from_ordered_comparison():
    predicate = Criterion.of("address.city").lt("Berlin")
    assert predicate(Customer(name="Bob", address=None)) is False
    assert predicate(Customer(name="Bob", address=Address(city="Athens"))) is True


def test_null_link_equals_none():
    predicate = Criterion.of("address.city").eq(None)
    assert predicate(Customer(name="Bob", address=None)) is True
