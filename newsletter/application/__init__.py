"""Application layer: dispatch orchestration and default wiring."""

from .dispatch import Newsletter, dump_record
from .wiring import (
    EMAIL_NOTIFICATION,
    PUSH_NOTIFICATION,
    build_default_notifications,
    run_newsletter,
)

__all__ = [
    "EMAIL_NOTIFICATION",
    "Newsletter",
    "PUSH_NOTIFICATION",
    "build_default_notifications",
    "dump_record",
    "run_newsletter",
]
