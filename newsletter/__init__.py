"""Newsletter dispatcher: validate user records and send per-channel notifications."""

from .channels import (
    DeviceIdValidator,
    EmailChannelValidator,
    EmailValidator,
    JsonFileUserSource,
    KafkaUserSource,
    Newsletter,
    Notification,
    PushChannelValidator,
    SampleUserSource,
    StaticUserSource,
    UniqueValidator,
    build_default_notifications,
    dump_record,
    parse_users_payload,
    publish_user_record,
    run_newsletter,
    send_email_via_console,
    send_push_via_console,
)

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
