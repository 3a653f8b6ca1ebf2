"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates transport-shaped data (a JSON document, a Kafka message value)
  into the list of user records the dispatcher consumes.
- It checks the outer shape only. Whether a given record can be sent is a
  domain decision, so individual entries pass through untouched.
"""

from __future__ import annotations

import json
from typing import Any, Mapping


def parse_users_payload(payload: Any) -> list[Any]:
    """Accept either a list of user records or `{"users": [...]}`."""
    if isinstance(payload, Mapping):
        if "users" not in payload:
            raise ValueError("Missing required field: users")
        payload = payload["users"]

    if not isinstance(payload, list):
        raise ValueError(
            f"Users payload must be a list of records, got {type(payload).__name__}"
        )
    return list(payload)


def decode_user_record(raw: bytes | str) -> dict[str, Any]:
    """Decode one transport value (UTF-8 JSON) into a user record dict."""
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    if not isinstance(text, str):
        raise ValueError(f"User record must be bytes or str, got {type(raw).__name__}")

    record = json.loads(text)
    if not isinstance(record, dict):
        raise ValueError(f"User record must be a JSON object, got {type(record).__name__}")
    return record


def encode_user_record(record: Mapping[str, Any]) -> bytes:
    return json.dumps(dict(record), separators=(",", ":")).encode("utf-8")
