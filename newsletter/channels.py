"""Compatibility facade for newsletter functions.

Module layout by abstraction layer:
- adapters: user sources, payload mapping and console senders
- domain: validators and the notification pairing
- application: dispatch across users and notifications
"""

from .adapters.console_senders import send_email_via_console, send_push_via_console
from .adapters.kafka_source import KafkaUserSource, publish_user_record
from .adapters.payload import parse_users_payload
from .adapters.user_sources import JsonFileUserSource, SampleUserSource, StaticUserSource
from .application.dispatch import Newsletter, dump_record
from .application.wiring import build_default_notifications, run_newsletter
from .domain.channel_validators import EmailChannelValidator, PushChannelValidator
from .domain.notification import Notification
from .domain.validators import DeviceIdValidator, EmailValidator, UniqueValidator

__all__ = [
    "DeviceIdValidator",
    "EmailChannelValidator",
    "EmailValidator",
    "JsonFileUserSource",
    "KafkaUserSource",
    "Newsletter",
    "Notification",
    "PushChannelValidator",
    "SampleUserSource",
    "StaticUserSource",
    "UniqueValidator",
    "build_default_notifications",
    "dump_record",
    "parse_users_payload",
    "publish_user_record",
    "run_newsletter",
    "send_email_via_console",
    "send_push_via_console",
]
