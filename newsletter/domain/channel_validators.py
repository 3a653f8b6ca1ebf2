"""Channel-level validators for user records.

Mental model refresher:
- Domain modules hold channel rules.
- A channel validator decides whether one user record can go out on its
  channel:
  - is the record a mapping at all?
  - are `name` and the channel's contact field present?
  - is the contact value well formed?
  - has this contact value already been used in the current run?
- Checks short-circuit in that order, so the uniqueness set only ever sees
  well-formed values.
"""

from __future__ import annotations

from typing import Any, Mapping

from .validators import DeviceIdValidator, EmailValidator, UniqueValidator, Validator


class ChannelValidator(Validator):
    """Required-field presence + field format + per-run uniqueness."""

    contact_field = ""

    def __init__(self, field_validator: Validator, unique_validator: Validator) -> None:
        self.field_validator = field_validator
        self.unique_validator = unique_validator

    def validate(self, value: Any) -> bool:
        return self.explain(value) is None

    def explain(self, record: Any) -> str | None:
        """Validate `record` and return the first failed check, or None on pass."""
        if not isinstance(record, Mapping):
            return f"record must be a mapping, got {type(record).__name__}"

        for field_name in ("name", self.contact_field):
            if field_name not in record:
                return f"missing required field: {field_name}"

        contact = record[self.contact_field]
        if not self.field_validator.validate(contact):
            return f"malformed {self.contact_field}: {contact!r}"
        if not self.unique_validator.validate(contact):
            return f"duplicate {self.contact_field}: {contact!r}"
        return None


class EmailChannelValidator(ChannelValidator):
    contact_field = "email"

    def __init__(
        self,
        email_validator: Validator | None = None,
        unique_validator: Validator | None = None,
    ) -> None:
        super().__init__(
            EmailValidator() if email_validator is None else email_validator,
            UniqueValidator() if unique_validator is None else unique_validator,
        )


class PushChannelValidator(ChannelValidator):
    contact_field = "device_id"

    def __init__(
        self,
        device_id_validator: Validator | None = None,
        unique_validator: Validator | None = None,
    ) -> None:
        super().__init__(
            DeviceIdValidator() if device_id_validator is None else device_id_validator,
            UniqueValidator() if unique_validator is None else unique_validator,
        )
