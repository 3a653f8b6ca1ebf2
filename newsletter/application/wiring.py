"""Default notification wiring.

Every call builds new validator instances, so each returned list carries its
own empty uniqueness sets. Use one list per dispatch run.
"""

from __future__ import annotations

from ..adapters.console_senders import send_email_via_console, send_push_via_console
from ..domain.channel_validators import EmailChannelValidator, PushChannelValidator
from ..domain.notification import Notification
from ..types import UserSource
from .dispatch import Newsletter

EMAIL_NOTIFICATION = "Email Notification"
PUSH_NOTIFICATION = "Push Notification"


def build_default_notifications() -> list[Notification]:
    return [
        Notification(EMAIL_NOTIFICATION, EmailChannelValidator(), send_email_via_console),
        Notification(PUSH_NOTIFICATION, PushChannelValidator(), send_push_via_console),
    ]


def run_newsletter(source: UserSource) -> Newsletter:
    """Load users from `source` and dispatch them over fresh default notifications."""
    newsletter = Newsletter(build_default_notifications())
    newsletter.load_users_from(source)
    newsletter.send()
    return newsletter
