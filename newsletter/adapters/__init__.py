"""Adapter layer: user sources, payload mapping and sender implementations."""

from .console_senders import send_email_via_console, send_push_via_console
from .kafka_source import KafkaUserSource, publish_user_record
from .payload import parse_users_payload
from .user_sources import JsonFileUserSource, SampleUserSource, StaticUserSource

__all__ = [
    "JsonFileUserSource",
    "KafkaUserSource",
    "SampleUserSource",
    "StaticUserSource",
    "parse_users_payload",
    "publish_user_record",
    "send_email_via_console",
    "send_push_via_console",
]
