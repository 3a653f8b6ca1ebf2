"""Notification: one named channel, its validator and its sender.

Mental model refresher:
- `Notification.send` is the only place a (user, channel) attempt can fail.
- It never raises. Validation failures and sender exceptions both come back
  as a plain result dictionary, and the dispatcher decides what to print.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..types import (
    STATUS_SEND_FAILED,
    STATUS_SENT,
    STATUS_VALIDATION_FAILED,
    SendFn,
    SendResult,
)
from .validators import Validator

INVALID_OBJECT_MESSAGE = "Invalid object"


@dataclass(frozen=True)
class Notification:
    name: str
    validator: Validator
    sender: SendFn

    def send(self, record: Any) -> SendResult:
        """Validate `record` and hand it to the sender when it passes."""
        try:
            reason = _rejection_reason(self.validator, record)
        except Exception as exc:
            reason = f"validator raised {type(exc).__name__}: {exc}"
        if reason is not None:
            return {
                "notification": self.name,
                "status": STATUS_VALIDATION_FAILED,
                "success": False,
                "error": INVALID_OBJECT_MESSAGE,
                "reason": reason,
            }

        try:
            self.sender(record)
        except Exception as exc:
            return {
                "notification": self.name,
                "status": STATUS_SEND_FAILED,
                "success": False,
                "error": str(exc),
                "reason": f"{type(exc).__name__}: {exc}",
            }

        return {
            "notification": self.name,
            "status": STATUS_SENT,
            "success": True,
            "error": None,
            "reason": None,
        }


def _rejection_reason(validator: Validator, record: Any) -> str | None:
    explain = getattr(validator, "explain", None)
    if explain is not None:
        return explain(record)
    return None if validator.validate(record) else "rejected by validator"
