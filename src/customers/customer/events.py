"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from customers.domain import customers


@customers.event(part_of="Customer")
class CustomerCreated:
    """A new customer was created with a freshly generated identity."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True, sanitize=False)
    email: String(required=True, sanitize=False)
    street: String(required=True, sanitize=False)
    city: String(required=True, sanitize=False)
    state: String(required=True, sanitize=False)
    zip_code: String(required=True, sanitize=False)
    country: String(required=True, sanitize=False)
    created_at: DateTime(required=True)


@customers.event(part_of="Customer")
class CustomerRenamed:
    """A customer's display name was changed."""

    __version__ = 1

    customer_id: Identifier(required=True)
    previous_name: String(required=True, sanitize=False)
    new_name: String(required=True, sanitize=False)
    renamed_at: DateTime(required=True)


@customers.event(part_of="Customer")
class EmailChanged:
    """A customer's email address was replaced."""

    __version__ = 1

    customer_id: Identifier(required=True)
    previous_email: String(required=True, sanitize=False)
    new_email: String(required=True, sanitize=False)
    changed_at: DateTime(required=True)


@customers.event(part_of="Customer")
class AddressChanged:
    """A customer's postal address was replaced."""

    __version__ = 1

    customer_id: Identifier(required=True)
    street: String(required=True, sanitize=False)
    city: String(required=True, sanitize=False)
    state: String(required=True, sanitize=False)
    zip_code: String(required=True, sanitize=False)
    country: String(required=True, sanitize=False)
    changed_at: DateTime(required=True)


@customers.event(part_of="Customer")
class CustomerActivated:
    __version__ = 1

    customer_id: Identifier(required=True)
    activated_at: DateTime(required=True)


@customers.event(part_of="Customer")
class CustomerDeactivated:
    __version__ = 1

    customer_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)
