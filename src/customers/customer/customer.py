"""Customer aggregate root composed of the CustomerId, Email and Address value objects."""

import uuid
from collections.abc import Mapping
from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, ValueObject

from customers.domain import customers
from customers.shared.address import Address
from customers.shared.customer_id import CustomerId, is_customer_id
from customers.shared.email import Email
from customers.utils.logging import get_logger

logger = get_logger(__name__)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def normalize_name(name):
    """Capitalize every space-separated word: ``"joão SILVA"`` becomes ``"João Silva"``.

    Splits on single spaces only, so runs of spaces are preserved as-is.
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.strip().split(" "))


def _validated_name(name):
    if not isinstance(name, str) or not name.strip():
        raise ValidationError({"name": ["Customer name is required"]})

    length = len(name.strip())
    if length < NAME_MIN_LENGTH:
        raise ValidationError({"name": [f"Name must have at least {NAME_MIN_LENGTH} characters"]})
    if length > NAME_MAX_LENGTH:
        raise ValidationError({"name": [f"Name cannot have more than {NAME_MAX_LENGTH} characters"]})

    return normalize_name(name)


def _to_customer_id(value):
    if isinstance(value, CustomerId):
        return value
    if value is None or not str(value).strip():
        raise ValidationError({"id": ["Customer ID is required"]})
    return CustomerId(value=str(value))


def _to_email(value):
    if isinstance(value, Email):
        return value
    if value is None:
        raise ValidationError({"email": ["Email is required"]})
    return Email.from_string(value)


def _to_address(value):
    if isinstance(value, Address):
        return value
    if value is None:
        raise ValidationError({"address": ["Address is required"]})
    return Address.from_props(value)


@customers.aggregate
class Customer:
    """A person who buys from us, identified by a generated CustomerId.

    Name, email, address and the active flag change only through the domain
    methods below. Each method builds and validates the new value first and then
    applies it together with a fresh ``updated_at``, so a failed call leaves the
    customer untouched. Every successful change records a fact event.

    Time and identity come from injectable collaborators: ``clock`` (a callable
    returning a ``datetime``) and ``id_generator`` (a callable returning a UUID).
    """

    id: Identifier(identifier=True)
    name: String(required=True, max_length=255, sanitize=False)
    email: ValueObject(Email, required=True)
    address: ValueObject(Address, required=True)
    is_active: Boolean(default=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_meets_minimum_length(self):
        # The upper bound applies to the raw trimmed input; case mapping can lengthen the stored name
        if not self.name:
            return
        if len(self.name.strip()) < NAME_MIN_LENGTH:
            raise ValidationError({"name": [f"Name must have at least {NAME_MIN_LENGTH} characters"]})

    @invariant.post
    def id_is_a_valid_customer_id(self):
        if not is_customer_id(str(self.id)):
            raise ValidationError({"id": [f"Customer ID must be a valid UUID: {self.id!r}"]})

    @classmethod
    def create(cls, name, email, address, *, clock=datetime.now, id_generator=uuid.uuid4):
        """Create a brand-new, active customer from raw input.

        ``email`` is a raw string (or an Email) and ``address`` a mapping of
        address fields (or an Address).
        """
        from customers.customer.events import CustomerCreated

        customer_id = CustomerId.generate(id_generator)
        email_vo = _to_email(email)
        address_vo = _to_address(address)
        now = clock()

        customer = cls(
            id=customer_id.value,
            name=_validated_name(name),
            email=email_vo,
            address=address_vo,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        customer.raise_(
            CustomerCreated(
                customer_id=customer.id,
                name=customer.name,
                email=email_vo.address,
                created_at=now,
                **address_vo.to_props(),
            )
        )
        logger.info("Customer created", customer_id=customer.id)
        return customer

    @classmethod
    def from_persistence(cls, record: Mapping, *, clock=datetime.now):
        """Rebuild a customer from a stored record, keeping its id, flag and timestamps.

        ``record`` has the shape produced by ``to_plain_object``. Value objects
        are accepted in place of the raw id, email and address. A missing
        ``is_active`` defaults to True and missing timestamps default to now.
        """
        now = clock()
        is_active = record.get("is_active")

        return cls(
            name=_validated_name(record.get("name")),
            email=_to_email(record.get("email")),
            address=_to_address(record.get("address")),
            id=_to_customer_id(record.get("id")).value,
            is_active=True if is_active is None else is_active,
            created_at=record.get("created_at") or now,
            updated_at=record.get("updated_at") or now,
        )

    @property
    def customer_id(self):
        return CustomerId(value=self.id)

    def change_name(self, new_name, *, clock=datetime.now):
        from customers.customer.events import CustomerRenamed

        name = _validated_name(new_name)
        previous_name = self.name
        now = clock()

        with atomic_change(self):
            self.name = name
            self.updated_at = now

        self.raise_(
            CustomerRenamed(
                customer_id=self.id,
                previous_name=previous_name,
                new_name=name,
                renamed_at=now,
            )
        )
        logger.info("Customer renamed", customer_id=self.id)

    def change_email(self, new_email, *, clock=datetime.now):
        from customers.customer.events import EmailChanged

        email = _to_email(new_email)
        if email == self.email:
            logger.warning("Rejected unchanged email", customer_id=self.id)
            raise ValidationError({"email": ["New email must be different from the current one"]})

        previous_email = self.email.address
        now = clock()

        with atomic_change(self):
            self.email = email
            self.updated_at = now

        self.raise_(
            EmailChanged(
                customer_id=self.id,
                previous_email=previous_email,
                new_email=email.address,
                changed_at=now,
            )
        )
        logger.info("Customer email changed", customer_id=self.id)

    def change_address(self, new_address, *, clock=datetime.now):
        from customers.customer.events import AddressChanged

        address = _to_address(new_address)
        if address == self.address:
            logger.warning("Rejected unchanged address", customer_id=self.id)
            raise ValidationError({"address": ["New address must be different from the current one"]})

        now = clock()

        with atomic_change(self):
            self.address = address
            self.updated_at = now

        self.raise_(AddressChanged(customer_id=self.id, changed_at=now, **address.to_props()))
        logger.info("Customer address changed", customer_id=self.id)

    def activate(self, *, clock=datetime.now):
        from customers.customer.events import CustomerActivated

        if self.is_active:
            logger.warning("Rejected activation of active customer", customer_id=self.id)
            raise ValidationError({"is_active": ["Customer is already active"]})

        now = clock()
        with atomic_change(self):
            self.is_active = True
            self.updated_at = now

        self.raise_(CustomerActivated(customer_id=self.id, activated_at=now))
        logger.info("Customer activated", customer_id=self.id)

    def deactivate(self, *, clock=datetime.now):
        from customers.customer.events import CustomerDeactivated

        if not self.is_active:
            logger.warning("Rejected deactivation of inactive customer", customer_id=self.id)
            raise ValidationError({"is_active": ["Customer is already inactive"]})

        now = clock()
        with atomic_change(self):
            self.is_active = False
            self.updated_at = now

        self.raise_(CustomerDeactivated(customer_id=self.id, deactivated_at=now))
        logger.info("Customer deactivated", customer_id=self.id)

    def full_info(self):
        return f"{self.name} ({self.email.address}) - {self.address.full_address()}"

    def is_from_city(self, city):
        return self.address.city.lower() == city.lower()

    def is_from_email_domain(self, domain):
        return self.email.domain().lower() == domain.lower()

    def to_plain_object(self):
        """Flatten the customer into the record shape ``from_persistence`` accepts."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email.address,
            "address": self.address.to_props(),
            "is_active": self.is_active,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def __str__(self):
        return f"Customer: {self.name} ({self.id})"
