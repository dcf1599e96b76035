"""
Catalog cache layers.

- ``MemoryCatalogCache``: short-TTL layer consulted on every read.
- ``InMemoryDurableStore`` / ``JsonFileDurableStore``: durable layer,
  written on every successful fetch and read only after a failed one,
  whatever its age.
"""

import json
import logging
import threading
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from .models import ProductCollection

logger = logging.getLogger(__name__)


class MemoryCatalogCache:
    """
    Short-TTL cache keyed by query.

    An entry is fresh iff ``now - fetched_at < ttl``. Entries are frozen
    collections swapped in whole under the lock.
    """

    def __init__(self, ttl: timedelta):
        self._ttl = ttl
        self._entries: dict[str, ProductCollection] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get_fresh(self, key: str, now: datetime) -> Optional[ProductCollection]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.fetched_at is None:
            return None
        if now - entry.fetched_at < self._ttl:
            return entry
        return None

    def put(self, key: str, collection: ProductCollection) -> None:
        with self._lock:
            self._entries[key] = collection

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class InMemoryDurableStore:
    """Durable layer that lives as long as the process."""

    def __init__(self) -> None:
        self._entries: dict[str, ProductCollection] = {}
        self._lock = threading.Lock()

    def load(self, key: str) -> Optional[ProductCollection]:
        with self._lock:
            return self._entries.get(key)

    def save(self, key: str, collection: ProductCollection) -> None:
        with self._lock:
            self._entries[key] = collection

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


_entries_adapter = TypeAdapter(dict[str, ProductCollection])


class JsonFileDurableStore:
    """
    Durable layer persisted to a JSON file, so a restart during an
    upstream outage still has something to show.

    The whole file is rewritten on save via a temp file and rename, so
    callers on the event loop run it in a worker thread.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, ProductCollection]:
        if not self._path.exists():
            return {}
        try:
            return _entries_adapter.validate_json(self._path.read_bytes())
        except ValueError:
            logger.warning(f"Durable catalog cache at {self._path} is unreadable, ignoring it")
            return {}

    def _write(self, entries: dict[str, ProductCollection]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(
            json.dumps({k: v.model_dump(mode="json") for k, v in entries.items()})
        )
        tmp.replace(self._path)

    def load(self, key: str) -> Optional[ProductCollection]:
        with self._lock:
            return self._read().get(key)

    def save(self, key: str, collection: ProductCollection) -> None:
        with self._lock:
            entries = self._read()
            entries[key] = collection
            self._write(entries)

    def clear(self) -> None:
        with self._lock:
            self._path.unlink(missing_ok=True)
