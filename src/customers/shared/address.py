"""Address value object for validated postal addresses."""

import re
from collections.abc import Mapping

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from customers.domain import customers

ZIP_CODE_PATTERN = re.compile(r"^\d{5}-\d{3}$")

_FIELDS = ("street", "city", "state", "zip_code", "country")

# Keys accepted as aliases when building from a mapping
_ALIASES = {"zipCode": "zip_code"}


def normalize_zip_code(raw):
    """Reformat a zip code to ``DDDDD-DDD`` when its digits number exactly eight.

    Anything else is only trimmed, so that the Address invariant rejects it.
    """
    if not isinstance(raw, str):
        return raw

    digits = re.sub(r"\D", "", raw)
    if len(digits) == 8:
        return f"{digits[:5]}-{digits[5:]}"
    return raw.strip()


def _trim(value):
    return value.strip() if isinstance(value, str) else value


@customers.value_object
class Address:
    """A postal address: street, city, state, zip code and country.

    All five parts are required. The zip code is stored in the canonical
    ``DDDDD-DDD`` form; ``Address.build`` and ``Address.from_props`` accept any
    punctuation around the eight digits and reformat it.
    """

    street: String(required=True, max_length=255, sanitize=False)
    city: String(required=True, max_length=100, sanitize=False)
    state: String(required=True, max_length=100, sanitize=False)
    zip_code: String(required=True, max_length=20, sanitize=False)
    country: String(required=True, max_length=100, sanitize=False)

    @classmethod
    def build(cls, street=None, city=None, state=None, zip_code=None, country=None):
        return cls(
            street=_trim(street),
            city=_trim(city),
            state=_trim(state),
            zip_code=normalize_zip_code(zip_code),
            country=_trim(country),
        )

    @classmethod
    def from_props(cls, props: Mapping):
        if not isinstance(props, Mapping):
            raise ValidationError({"address": ["Address must be a mapping of address fields"]})

        kwargs = {_ALIASES.get(key, key): value for key, value in props.items()}
        return cls.build(**{field: kwargs.get(field) for field in _FIELDS})

    @invariant.post
    def fields_are_not_blank(self):
        for field in _FIELDS:
            value = getattr(self, field)
            if isinstance(value, str) and not value.strip():
                raise ValidationError({field: ["is required"]})

    @invariant.post
    def zip_code_is_canonical(self):
        if self.zip_code is None:
            return
        if not ZIP_CODE_PATTERN.fullmatch(self.zip_code):
            raise ValidationError({"zip_code": [f"Invalid zip code format: {self.zip_code!r}"]})

    def full_address(self):
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}, {self.country}"

    def to_props(self):
        return {field: getattr(self, field) for field in _FIELDS}

    def __str__(self):
        return self.full_address()
