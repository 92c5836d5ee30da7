"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Container for the result of the last When step."""
    return {"order_id": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a customer named "{name}"'), target_fixture="customer_name")
def _(name):
    return name


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request succeeds")
def _(outcome):
    assert outcome["exc"] is None
    assert isinstance(outcome["order_id"], int)


@then(parsers.cfparse('the request is rejected with "{message}"'))
def _(outcome, message):
    assert isinstance(outcome["exc"], ValidationError)
    assert message in str(outcome["exc"])


@then("the order is not found")
def _(outcome):
    assert isinstance(outcome["exc"], ObjectNotFoundError)


@then(parsers.cfparse("the order has {count:d} line items"))
def _(service, outcome, count):
    assert len(service.fetch_order(str(outcome["order_id"]))) == count


@then(parsers.cfparse('line item {position:d} is product {product_id:d} with EAN "{ean}"'))
def _(service, outcome, position, product_id, ean):
    record = service.fetch_order(str(outcome["order_id"]))[position - 1]
    assert record["product_id"] == product_id
    assert record["product_ean"] == ean


@then(parsers.cfparse('every line item belongs to "{name}"'))
def _(service, outcome, name):
    assert {r["customer_name"] for r in service.fetch_order(str(outcome["order_id"]))} == {name}
