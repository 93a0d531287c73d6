"""BDD tests for the customer lifecycle: renaming, email changes, (de)activation."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, when

scenarios("features/customer_lifecycle.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the customer is deactivated")
def deactivate_customer(customer, error):
    try:
        customer.deactivate()
    except ValidationError as exc:
        error["exc"] = exc


@when("the customer is activated")
def activate_customer(customer, error):
    try:
        customer.activate()
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the customer is renamed to "{name}"'))
def rename_customer(customer, name, error):
    try:
        customer.change_name(name)
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the customer changes email to "{email}"'))
def change_customer_email(customer, email, error):
    try:
        customer.change_email(email)
    except ValidationError as exc:
        error["exc"] = exc
