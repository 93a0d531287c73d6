"""CustomerId value object: the textual identity of a Customer."""

import re
import uuid

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from customers.domain import customers

CUSTOMER_ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_customer_id(value) -> bool:
    return isinstance(value, str) and CUSTOMER_ID_PATTERN.fullmatch(value) is not None


@customers.value_object
class CustomerId:
    """A version-4 UUID in its 8-4-4-4-12 hexadecimal form, compared case-sensitively by value."""

    value: String(required=True, max_length=36, sanitize=False)

    @classmethod
    def generate(cls, id_generator=uuid.uuid4):
        """Create a fresh identifier from ``id_generator`` (any callable returning a UUID or its string)."""
        return cls(value=str(id_generator()))

    @invariant.post
    def value_is_a_version_4_uuid(self):
        if self.value is not None and not is_customer_id(self.value):
            raise ValidationError({"id": [f"Customer ID must be a valid UUID: {self.value!r}"]})

    def __str__(self):
        return self.value
