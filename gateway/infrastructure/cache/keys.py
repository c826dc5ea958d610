"""Cache key builders. Single place for key format (DRY).

Keys have the shape ``{prefix}_{tenant_id}`` (e.g. ``tenant_1``,
``analytics_1``). Tenant ids are validated as decimal digits before they
reach these builders, so only the prefix needs a separator check.
"""

from gateway.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_TENANT


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def tenant_key(tenant_id: str) -> str:
    """Cache key for a tenant record by id."""
    return f"{CACHE_PREFIX_TENANT}{CACHE_KEY_SEP}{tenant_id}"


def resource_key(resource: str, tenant_id: str) -> str:
    """Cache key for a tenant-scoped resource (e.g. analytics, users)."""
    _validate_key_component(resource, "resource")
    return f"{resource}{CACHE_KEY_SEP}{tenant_id}"
