"""Kafka transport adapters for user records.

Mental model refresher:
- This module is transport glue to Kafka itself.
- `KafkaUserSource` drains a topic of JSON user records into a plain list, so
  the dispatcher sees the same thing it gets from any other source.
- `publish_user_record` is the producer side, used for local testing.
- Validation still happens in the domain layer; records that are not JSON
  objects are skipped here because they cannot be represented at all.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Mapping

from .payload import decode_user_record, encode_user_record

LOGGER = logging.getLogger(__name__)

DEFAULT_USERS_TOPIC = "newsletter.users"


@dataclass(frozen=True)
class KafkaSettings:
    bootstrap_servers: list[str]
    topic: str
    group_id: str
    auto_offset_reset: str
    poll_timeout_ms: int
    max_records: int
    assignment_timeout_seconds: float
    send_timeout_seconds: float
    acks: str

    @classmethod
    def from_env(cls, *, topic: str | None = None) -> "KafkaSettings":
        raw_servers = os.getenv("KAFKA_BOOTSTRAP_SERVERS", "")
        servers = [item.strip() for item in raw_servers.split(",") if item.strip()]
        if not servers:
            raise RuntimeError(
                "KAFKA_BOOTSTRAP_SERVERS must include at least one host:port"
            )

        poll_timeout_ms = int(float(os.getenv("KAFKA_POLL_TIMEOUT_SECONDS", "1.0")) * 1000)
        if poll_timeout_ms <= 0:
            raise RuntimeError("KAFKA_POLL_TIMEOUT_SECONDS must be > 0")

        return cls(
            bootstrap_servers=servers,
            topic=topic or os.getenv("NEWSLETTER_USERS_TOPIC", DEFAULT_USERS_TOPIC),
            group_id=os.getenv("KAFKA_GROUP_ID", "newsletter-dispatcher"),
            auto_offset_reset=os.getenv("KAFKA_AUTO_OFFSET_RESET", "earliest"),
            poll_timeout_ms=poll_timeout_ms,
            max_records=int(os.getenv("KAFKA_MAX_RECORDS_PER_POLL", "50")),
            assignment_timeout_seconds=float(
                os.getenv("KAFKA_ASSIGNMENT_TIMEOUT_SECONDS", "30")
            ),
            send_timeout_seconds=float(os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10")),
            acks=os.getenv("KAFKA_PRODUCER_ACKS", "all"),
        )


class KafkaUserSource:
    """Read every pending user record from a Kafka topic.

    Empty polls before the group has assigned partitions are retried until
    `assignment_timeout_seconds`; after assignment, the first empty poll ends
    the drain. Offsets are committed afterwards when `commit` is true, so the
    next run only sees new records.
    """

    def __init__(self, *, topic: str | None = None, commit: bool = True) -> None:
        self.topic = topic
        self.commit = commit

    def get_users(self) -> list[dict[str, Any]]:
        settings = KafkaSettings.from_env(topic=self.topic)
        kafka = _kafka_module()
        consumer = kafka.KafkaConsumer(
            settings.topic,
            bootstrap_servers=settings.bootstrap_servers,
            group_id=settings.group_id,
            enable_auto_commit=False,
            auto_offset_reset=settings.auto_offset_reset,
        )

        try:
            users = _drain(consumer, settings)
            if self.commit:
                consumer.commit()
        finally:
            consumer.close()

        LOGGER.info("Loaded %d user records from topic %s", len(users), settings.topic)
        return users


def _drain(consumer: Any, settings: KafkaSettings) -> list[dict[str, Any]]:
    deadline = time.monotonic() + settings.assignment_timeout_seconds
    users: list[dict[str, Any]] = []
    while True:
        batches = consumer.poll(
            timeout_ms=settings.poll_timeout_ms, max_records=settings.max_records
        )
        if batches:
            for messages in batches.values():
                for message in messages:
                    record = _decode_message(message)
                    if record is not None:
                        users.append(record)
            continue

        if consumer.assignment():
            return users
        if time.monotonic() >= deadline:
            raise RuntimeError(
                f"No partitions assigned for topic {settings.topic} within "
                f"{settings.assignment_timeout_seconds}s"
            )
        LOGGER.debug("Waiting for partition assignment on %s", settings.topic)


def publish_user_record(
    record: Mapping[str, Any],
    *,
    topic: str | None = None,
) -> dict[str, Any]:
    """Publish one user record to the users topic."""
    settings = KafkaSettings.from_env(topic=topic)
    producer = _kafka_module().KafkaProducer(
        bootstrap_servers=settings.bootstrap_servers,
        value_serializer=encode_user_record,
        acks=settings.acks,
    )
    try:
        metadata = producer.send(settings.topic, value=dict(record)).get(
            timeout=settings.send_timeout_seconds
        )
    finally:
        producer.close()

    return {
        "topic": metadata.topic,
        "partition": metadata.partition,
        "offset": metadata.offset,
    }


def _decode_message(message: Any) -> dict[str, Any] | None:
    try:
        return decode_user_record(message.value)
    except ValueError as exc:
        LOGGER.warning(
            "Skipping undecodable record topic=%s partition=%s offset=%s: %s",
            message.topic,
            message.partition,
            message.offset,
            exc,
        )
        return None


def _kafka_module() -> Any:
    try:
        import kafka
    except ImportError as exc:
        raise RuntimeError(
            "Kafka support requires `kafka-python`. Install with: pip install kafka-python"
        ) from exc
    return kafka
