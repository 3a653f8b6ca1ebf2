"""Field-level validator primitives.

Mental model refresher:
- Each validator answers one yes/no question about a single value.
- They never raise for bad input; a malformed value is just `False`.
- `UniqueValidator` is the only stateful one. Its seen-set lives as long as
  the instance, so a new dispatch run needs a new instance (or `reset()`).
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Hashable

import email_validator
from email_validator import EmailNotValidError, validate_email

# Syntax only: reserved names such as .test, .local and .invalid are still
# well-formed domains.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()

DEVICE_ID_PATTERN = re.compile(r"(?:[0-9A-F]{2}-){5}[0-9A-F]{2}")


class Validator(ABC):
    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Return True when `value` passes this check."""


class EmailValidator(Validator):
    """Syntax-only email check (no DNS or MX lookups)."""

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str) or not value:
            return False
        try:
            validate_email(value, check_deliverability=False, allow_smtputf8=False)
        except EmailNotValidError:
            return False
        return True


class DeviceIdValidator(Validator):
    """Six uppercase hex pairs joined by hyphens, e.g. `B0-5A-7B-0B-32-BD`."""

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return DEVICE_ID_PATTERN.fullmatch(value) is not None


class UniqueValidator(Validator):
    """Pass each value once per instance.

    Unhashable values (dicts, lists) are compared by equality against a
    separate list instead of the set.
    """

    def __init__(self) -> None:
        self._seen: set[Hashable] = set()
        self._seen_unhashable: list[Any] = []

    def validate(self, value: Any) -> bool:
        try:
            if value in self._seen:
                return False
            self._seen.add(value)
        except TypeError:
            if value in self._seen_unhashable:
                return False
            self._seen_unhashable.append(value)
        return True

    def reset(self) -> None:
        self._seen.clear()
        self._seen_unhashable.clear()
