"""Field validators for IBANs, phone numbers and vehicle plates."""

from __future__ import annotations

import re
from typing import Callable

_IBAN = re.compile(r"([A-Za-z]{2})([0-9]{24})")
_PHONE = re.compile(r"[0-9]{7,20}")
_PLATE = re.compile(r"([0-9]{2})([A-Z]{1,4})([0-9]{2,4})")


class ValidationError(ValueError):
    """A value failed a validation rule."""

    def __init__(self, value: str, rule: str) -> None:
        super().__init__(f"value {value!r} failed on the {rule!r} rule")
        self.value = value
        self.rule = rule


def is_iban(value: str) -> bool:
    """Tell whether ``value`` holds an IBAN; an empty value passes."""
    return not value or _IBAN.search(value) is not None


def is_phone(value: str) -> bool:
    """Tell whether ``value`` holds a phone number of 7 to 20 digits."""
    return _PHONE.search(value) is not None


def is_plate(value: str) -> bool:
    """Tell whether ``value`` holds a vehicle plate."""
    return _PLATE.search(value) is not None


_RULES: dict[str, Callable[[str], bool]] = {
    "iban": is_iban,
    "phone": is_phone,
    "plate": is_plate,
}


def validate(value: str, rule: str) -> str:
    """Check ``value`` against comma-separated rules and return it.

    Raises ValidationError when a rule fails and ValueError for unknown rules.
    """
    for name in filter(None, (part.strip() for part in rule.split(","))):
        check = _RULES.get(name)
        if check is None:
            raise ValueError(f"unknown validation rule: {name!r}")
        if not check(value):
            raise ValidationError(value, name)
    return value