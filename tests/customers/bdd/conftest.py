"""Shared BDD fixtures and step definitions for the Customers domain."""

import pytest
from customers.customer.customer import Customer
from customers.customer.events import (
    AddressChanged,
    CustomerActivated,
    CustomerCreated,
    CustomerDeactivated,
    CustomerRenamed,
    EmailChanged,
)
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_EVENT_CLASSES = {
    "CustomerCreated": CustomerCreated,
    "CustomerRenamed": CustomerRenamed,
    "EmailChanged": EmailChanged,
    "AddressChanged": AddressChanged,
    "CustomerActivated": CustomerActivated,
    "CustomerDeactivated": CustomerDeactivated,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer", target_fixture="customer")
def registered_customer(address_props):
    customer = Customer.create("Ana Costa", "ana.costa@email.com", address_props)
    customer._events.clear()
    return customer


@given("the customer is inactive")
def customer_is_inactive(customer):
    customer.deactivate()
    customer._events.clear()


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then("the registration fails with a validation error")
def registration_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the customer name is "{name}"'))
def customer_name_is(customer, name):
    assert customer.name == name


@then("the customer is active")
def customer_is_active(customer):
    assert customer.is_active is True


@then("the customer is inactive")
def customer_is_now_inactive(customer):
    assert customer.is_active is False


@then(parsers.cfparse("a {event_type} event is raised"))
def event_is_raised(customer, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in customer._events)
