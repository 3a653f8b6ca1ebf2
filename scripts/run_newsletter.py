#!/usr/bin/env python3
"""Run the newsletter dispatcher once and exit.

Users come from the built-in sample set by default, from a JSON file with
`--users-file`, or from the Kafka users topic with `--kafka`.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from newsletter.adapters.kafka_source import KafkaUserSource  # noqa: E402
from newsletter.adapters.user_sources import JsonFileUserSource, SampleUserSource  # noqa: E402
from newsletter.application.wiring import run_newsletter  # noqa: E402
from newsletter.types import UserSource  # noqa: E402


def main() -> int:
    _load_env_file(REPO_ROOT / ".env")
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_newsletter(select_source(args))
    return 0


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate user records and send email/push notifications."
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--users-file",
        type=Path,
        default=None,
        help="JSON file with a list of user records or {\"users\": [...]}.",
    )
    group.add_argument(
        "--kafka",
        action="store_true",
        help="Drain user records from the Kafka users topic.",
    )
    parser.add_argument(
        "--topic",
        default=None,
        help="Override Kafka topic (defaults to NEWSLETTER_USERS_TOPIC).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("NEWSLETTER_LOG_LEVEL", "WARNING").upper(),
        help="Logging level for diagnostics on stderr.",
    )
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid NEWSLETTER_LOG_LEVEL: {args.log_level!r}")
    if args.topic is not None and not args.kafka:
        parser.error("--topic requires --kafka")
    return args


def select_source(args: argparse.Namespace) -> UserSource:
    if args.users_file is not None:
        return JsonFileUserSource(args.users_file)
    if args.kafka:
        return KafkaUserSource(topic=args.topic)
    return SampleUserSource()


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
