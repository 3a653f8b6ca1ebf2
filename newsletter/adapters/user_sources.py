"""User source adapters.

Mental model refresher:
- The dispatcher only needs something with `get_users()`.
- Sources here cover sample data, in-memory lists and JSON files. The Kafka
  source lives in `kafka_source` so importing this module never needs
  kafka-python.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..fixtures import sample_users
from .payload import parse_users_payload

LOGGER = logging.getLogger(__name__)


class StaticUserSource:
    def __init__(self, records: Iterable[Any]) -> None:
        self._records = list(records)

    def get_users(self) -> list[Any]:
        return list(self._records)


class SampleUserSource(StaticUserSource):
    """The seven demo records used by `scripts/run_newsletter.py`."""

    def __init__(self) -> None:
        super().__init__(sample_users())


class JsonFileUserSource:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get_users(self) -> list[Any]:
        with self.path.open("r", encoding="utf-8") as file_handle:
            try:
                payload = json.load(file_handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {self.path}: {exc}") from exc
        users = parse_users_payload(payload)
        LOGGER.info("Loaded %d user records from %s", len(users), self.path)
        return users
