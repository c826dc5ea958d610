"""Cache protocol used by the resolver and the request pipeline (DIP)."""

from typing import Protocol, TypeVar

K = TypeVar("K", contravariant=True)
V = TypeVar("V")


class CacheProtocol(Protocol[K, V]):
    """Protocol for key-value caches with expiry. get returns None on miss."""

    def get(self, key: K) -> V | None:
        """Return the live cached value or None."""
        ...

    def set(self, key: K, value: V) -> None:
        """Store value; it expires after the cache's TTL."""
        ...

    def delete(self, key: K) -> bool:
        """Remove key from cache. Returns True if an entry was removed."""
        ...
