"""In-memory store for saved kitchen configurations.

Entries are kept verbatim (configuration document plus the generated
modules) under a generated id and expire after a time-to-live. The store
is bounded: when it is full the oldest entry is evicted. Writes are
last-write-wins; there is no other locking discipline for callers.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
ID_SUFFIX_LENGTH = 9

DEFAULT_TTL_SECONDS = 86400
DEFAULT_CAPACITY = 1000


class KitchenConfigNotFoundError(Exception):
    """Raised when no (unexpired) configuration exists for an id."""

    def __init__(self, config_id: str) -> None:
        self.config_id = config_id
        super().__init__(f"Kitchen configuration not found: {config_id}")


@dataclass(frozen=True)
class StoredKitchenConfig:
    """A saved configuration.

    Attributes:
        config_id: Generated id, "kitchen-<unixMillis>-<9 base36 chars>".
        config: The configuration document as saved.
        modules: The generated modules as saved.
        timestamp: Save time, ISO-8601 UTC.
        saved_at: Save time in epoch seconds, used for expiry.
        description: Optional free-text description of the design.
    """

    config_id: str
    config: dict[str, Any]
    modules: list[Any]
    timestamp: str
    saved_at: float
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "config": self.config,
            "modules": self.modules,
            "timestamp": self.timestamp,
        }
        if self.description is not None:
            data["description"] = self.description
        return data


def generate_config_id(now: float) -> str:
    """Build an id of the form kitchen-<unixMillis>-<9 base36 chars>."""
    suffix = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
    return f"kitchen-{int(now * 1000)}-{suffix}"


def _iso_timestamp(now: float) -> str:
    moment = datetime.fromtimestamp(now, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class KitchenConfigStore:
    """Thread-safe key-value store with TTL expiry and bounded capacity.

    Example:
        store = KitchenConfigStore(ttl_seconds=3600, capacity=100)
        entry = store.save(config_dict, modules)
        same = store.get(entry.config_id)
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Create a store.

        Args:
            ttl_seconds: Lifetime of an entry; 0 disables expiry.
            capacity: Maximum number of entries kept.
            clock: Source of the current time in epoch seconds.
        """
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.ttl_seconds = ttl_seconds
        self.capacity = capacity
        self._clock = clock
        self._entries: OrderedDict[str, StoredKitchenConfig] = OrderedDict()
        self._lock = threading.Lock()

    def save(
        self,
        config: dict[str, Any],
        modules: list[Any],
        description: str | None = None,
    ) -> StoredKitchenConfig:
        """Store a configuration and its modules verbatim.

        Returns:
            The stored entry with its generated id and timestamp. A later
            get may not find it once concurrent saves have evicted it.
        """
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            config_id = generate_config_id(now)
            while config_id in self._entries:
                config_id = generate_config_id(now)
            entry = StoredKitchenConfig(
                config_id=config_id,
                config=config,
                modules=modules,
                timestamp=_iso_timestamp(now),
                saved_at=now,
                description=description,
            )
            self._entries[config_id] = entry
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.warning(f"Store full, evicted kitchen configuration {evicted}")
        logger.info(f"Saved kitchen configuration {config_id}")
        return entry

    def get(self, config_id: str) -> StoredKitchenConfig:
        """Retrieve a saved configuration.

        Raises:
            KitchenConfigNotFoundError: If the id is unknown or expired.
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(config_id)
            if entry is None:
                raise KitchenConfigNotFoundError(config_id)
            if self._expired(entry, now):
                del self._entries[config_id]
                logger.debug(f"Kitchen configuration {config_id} expired")
                raise KitchenConfigNotFoundError(config_id)
            return entry

    def __contains__(self, config_id: str) -> bool:
        with self._lock:
            entry = self._entries.get(config_id)
            return entry is not None and not self._expired(entry, self._clock())

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired(self._clock())
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _expired(self, entry: StoredKitchenConfig, now: float) -> bool:
        return self.ttl_seconds > 0 and now - entry.saved_at >= self.ttl_seconds

    def _purge_expired(self, now: float) -> None:
        if self.ttl_seconds <= 0:
            return
        expired = [cid for cid, e in self._entries.items() if self._expired(e, now)]
        for config_id in expired:
            del self._entries[config_id]
        if expired:
            logger.debug(f"Purged {len(expired)} expired kitchen configurations")
