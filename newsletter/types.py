"""Shared type aliases for the newsletter package."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

UserRecord = Mapping[str, Any]
UserRecordDict = dict[str, Any]
SendResult = dict[str, Any]

SendFn = Callable[[UserRecord], None]

STATUS_SENT = "sent"
STATUS_VALIDATION_FAILED = "validation_failed"
STATUS_SEND_FAILED = "send_failed"


class UserSource(Protocol):
    def get_users(self) -> list[Any]: ...
