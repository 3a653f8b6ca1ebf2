"""Console sender adapters.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where provider SDK/API calls would live (SMTP, APNs,
  FCM, etc). Here each sender just prints a confirmation line.
- Notifications call these through injected functions; the domain does not
  know which implementation is underneath.
"""

from __future__ import annotations

from ..types import UserRecord


def send_email_via_console(record: UserRecord) -> None:
    print(f"Email {record['email']} has been sent to user {record['name']}")


def send_push_via_console(record: UserRecord) -> None:
    print(
        f"Push notification has been sent to user {record['name']} "
        f"with device_id {record['device_id']}"
    )
