"""Application orchestration for newsletter dispatch.

Mental model refresher:
- The application layer drives the use-case across domain objects.
- `Newsletter.send` walks users (outer loop) and notifications (inner loop)
  in load/configuration order. Output order is part of the contract.
- A failed (user, notification) pair is reported and skipped; it never stops
  the rest of the batch.
"""

from __future__ import annotations

import logging
from pprint import pformat
from typing import Any, Iterable, Mapping, Sequence

from ..domain.notification import Notification
from ..types import SendResult, UserSource

LOGGER = logging.getLogger(__name__)


class Newsletter:
    def __init__(self, notifications: Sequence[Notification]) -> None:
        self.notifications = list(notifications)
        self.users: list[Any] = []

    def load_users(self, records: Iterable[Any]) -> None:
        """Replace the working set of user records."""
        self.users = list(records)

    def load_users_from(self, source: UserSource) -> None:
        self.load_users(source.get_users())

    def send(self) -> None:
        """Attempt every (user, notification) pair once.

        Uniqueness state lives in the notifications' validators, so calling
        this twice on the same instance rejects records that already went out.
        Build fresh notifications for an independent run.
        """
        for user in self.users:
            for notification in self.notifications:
                result = notification.send(user)
                if result["success"]:
                    LOGGER.debug("%s sent for %r", notification.name, _user_label(user))
                    continue
                _report_failure(result, user)


def _report_failure(result: SendResult, user: Any) -> None:
    LOGGER.warning(
        "%s rejected for %r: status=%s reason=%s",
        result["notification"],
        _user_label(user),
        result["status"],
        result["reason"],
    )
    print(f"Unable to send {result['notification']} failed with message '{result['error']}'")
    print(dump_record(user))


def dump_record(record: Any) -> str:
    return pformat(record, sort_dicts=False)


def _user_label(user: Any) -> Any:
    if isinstance(user, Mapping):
        return user.get("name", "<unnamed>")
    return "<invalid record>"
