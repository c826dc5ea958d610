"""In-process TTL cache with a periodic sweep task.

An entry is live while ``now - written_at < ttl``. Reads check liveness
inline, so a stale entry is a miss whether or not the sweep has removed it;
the sweep only reclaims memory. There is no size-based eviction: without a
running sweep the map grows with every distinct key written.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    """Cached value and the clock reading at which it was written."""

    value: V
    written_at: float


class TTLCache(Generic[K, V]):
    """Thread-safe expiring key-value store.

    get/set/delete/sweep hold one lock, so they are atomic with respect to
    each other whether called from the event loop or from threadpool
    handlers. The sweep timer is an asyncio task controlled by start()/stop()
    (called from the application lifespan).
    """

    def __init__(
        self,
        ttl: float,
        *,
        name: str = "cache",
        sweep_interval: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty cache.

        Args:
            ttl: Time-to-live in seconds; must be positive.
            name: Label used in log messages.
            sweep_interval: Seconds between sweeps; defaults to ttl.
            clock: Monotonic time source (injectable for tests).
        """
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got: {ttl!r}")
        self.ttl = ttl
        self.name = name
        self.sweep_interval = sweep_interval if sweep_interval is not None else ttl
        self._clock = clock
        self._entries: dict[K, CacheEntry[V]] = {}
        self._lock = threading.Lock()
        self._sweep_task: asyncio.Task[None] | None = None

    def __len__(self) -> int:
        """Number of physically stored entries, live or stale."""
        with self._lock:
            return len(self._entries)

    def _is_live(self, entry: CacheEntry[V], now: float) -> bool:
        return now - entry.written_at < self.ttl

    def get(self, key: K) -> V | None:
        """Return the live value for key, or None on miss or expiry."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or not self._is_live(entry, now):
                logger.debug("Cache MISS [%s]: %s", self.name, key)
                return None
            logger.debug("Cache HIT [%s]: %s", self.name, key)
            return entry.value

    def set(self, key: K, value: V) -> None:
        """Store value under key, stamped with the current clock reading."""
        entry = CacheEntry(value=value, written_at=self._clock())
        with self._lock:
            self._entries[key] = entry
        logger.debug("Cache SET [%s]: %s (TTL: %ss)", self.name, key, self.ttl)

    def delete(self, key: K) -> bool:
        """Remove key. Returns True if an entry (live or stale) was removed."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def sweep(self, now: float | None = None) -> int:
        """Remove all entries with ``now - written_at >= ttl``.

        Args:
            now: Clock reading to sweep against; defaults to the cache clock.

        Returns:
            Number of entries removed.
        """
        if now is None:
            now = self._clock()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if not self._is_live(entry, now)
            ]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info("Cache sweep [%s]: removed %s expired entries", self.name, len(expired))
        return len(expired)

    @property
    def running(self) -> bool:
        """True while the sweep task is scheduled."""
        return self._sweep_task is not None and not self._sweep_task.done()

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self.sweep_interval)
            self.sweep()

    def start(self) -> None:
        """Start the periodic sweep on the running event loop. Idempotent."""
        if self.running:
            return
        self._sweep_task = asyncio.create_task(
            self._sweep_loop(), name=f"ttl-cache-sweep:{self.name}"
        )
        logger.info(
            "Cache sweep started [%s]: every %ss", self.name, self.sweep_interval
        )

    async def stop(self) -> None:
        """Cancel the sweep task and wait for it to finish. Idempotent."""
        task = self._sweep_task
        self._sweep_task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Cache sweep stopped [%s]", self.name)
