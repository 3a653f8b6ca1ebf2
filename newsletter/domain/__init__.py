"""Domain layer: validation rules and the notification pairing."""

from .channel_validators import ChannelValidator, EmailChannelValidator, PushChannelValidator
from .notification import INVALID_OBJECT_MESSAGE, Notification
from .validators import DeviceIdValidator, EmailValidator, UniqueValidator, Validator

__all__ = [
    "ChannelValidator",
    "DeviceIdValidator",
    "EmailChannelValidator",
    "EmailValidator",
    "INVALID_OBJECT_MESSAGE",
    "Notification",
    "PushChannelValidator",
    "UniqueValidator",
    "Validator",
]
