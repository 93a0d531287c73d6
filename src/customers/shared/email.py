"""Email value object for validated, normalized email addresses."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from customers.domain import customers

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_LENGTH = 254


def normalize_email(raw):
    """Trim and lower-case a raw email string. Non-strings pass through untouched."""
    if isinstance(raw, str):
        return raw.strip().lower()
    return raw


@customers.value_object
class Email:
    """An email address in canonical (trimmed, lower-cased) form.

    Build one from user input with ``Email.from_string``, which validates the raw
    string as given (surrounding whitespace is rejected) and then lower-cases it.
    Direct construction accepts only values that are already normalized, so two
    equal addresses always compare equal.
    """

    address: String(required=True, max_length=MAX_LENGTH, sanitize=False)

    @classmethod
    def from_string(cls, raw):
        if raw is None or not str(raw).strip():
            raise ValidationError({"email": ["Email cannot be empty"]})

        raw = str(raw)
        if not EMAIL_PATTERN.fullmatch(raw):
            raise ValidationError({"email": [f"Invalid email format: {raw!r}"]})
        if len(raw) > MAX_LENGTH:
            raise ValidationError({"email": [f"Email cannot have more than {MAX_LENGTH} characters"]})

        return cls(address=normalize_email(raw))

    @invariant.post
    def address_is_well_formed(self):
        """Ensure the address has a ``local@domain.tld`` shape."""
        if self.address is None:
            return
        if not EMAIL_PATTERN.fullmatch(self.address):
            raise ValidationError({"email": [f"Invalid email format: {self.address!r}"]})

    @invariant.post
    def address_is_normalized(self):
        if self.address is not None and self.address != normalize_email(self.address):
            raise ValidationError({"email": ["Email must be trimmed and lower-cased"]})

    def local_part(self):
        local, separator, _ = self.address.partition("@")
        return local if separator else ""

    def domain(self):
        _, _, domain = self.address.partition("@")
        return domain

    def __str__(self):
        return self.address
