"""Cache: in-process TTL cache and cache key utilities.

Used by the tenant resolver and the tenant-scoped resource routes.
Key format is in keys.py (DRY).
"""

from gateway.infrastructure.cache.cache_protocol import CacheProtocol
from gateway.infrastructure.cache.keys import resource_key, tenant_key
from gateway.infrastructure.cache.ttl_cache import CacheEntry, TTLCache

__all__ = [
    "CacheEntry",
    "CacheProtocol",
    "TTLCache",
    "resource_key",
    "tenant_key",
]
