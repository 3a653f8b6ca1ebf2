"""Sample user records for local runs and the end-to-end test."""

from __future__ import annotations

from .types import UserRecordDict


def sample_users() -> list[UserRecordDict]:
    return [
        {"name": "Ivan", "email": "ivan@test.com", "device_id": "B0-5A-7B-0B-32-BD"},
        {"name": "Peter", "email": "peter@test.com"},
        {"name": "Mark", "device_id": "B0-5A-7B-0B-32-BD"},
        {"name": "Nina", "email": "..."},
        {"name": "Luke", "device_id": "D0-F2-72-0C-DF"},
        {"name": "Zerg", "device_id": ""},
        {"email": "...", "device_id": ""},
    ]
