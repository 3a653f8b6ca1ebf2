#!/usr/bin/env python3
"""Publish one user record to the Kafka users topic for local testing."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from newsletter.adapters.kafka_source import publish_user_record  # noqa: E402


def main() -> int:
    _load_env_file(REPO_ROOT / ".env")
    args = parse_args()
    record = build_record(args)
    metadata = publish_user_record(record, topic=args.topic)

    print("[PUBLISHED]")
    print(f"topic={metadata['topic']}")
    print(f"partition={metadata['partition']}")
    print(f"offset={metadata['offset']}")
    print(f"record={record}")
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Publish one newsletter user record for Kafka testing."
    )
    parser.add_argument("--name", default=None, help="User name.")
    parser.add_argument("--email", default=None, help="Email address for the email channel.")
    parser.add_argument(
        "--device-id",
        default=None,
        help="Device id for the push channel, e.g. B0-5A-7B-0B-32-BD.",
    )
    parser.add_argument(
        "--topic",
        default=None,
        help="Override Kafka topic (defaults to NEWSLETTER_USERS_TOPIC).",
    )
    return parser.parse_args()


def build_record(args: argparse.Namespace) -> dict[str, str]:
    # Omitted flags stay absent so presence checks behave as for any other source.
    record: dict[str, str] = {}
    if args.name is not None:
        record["name"] = args.name
    if args.email is not None:
        record["email"] = args.email
    if args.device_id is not None:
        record["device_id"] = args.device_id
    if not record:
        raise SystemExit("At least one of --name, --email or --device-id is required.")
    return record


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)


if __name__ == "__main__":
    sys.exit(main())
