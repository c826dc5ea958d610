"""Core constants: cache key prefixes, resource names and feature names.

Single source of truth for cache key structure (DRY). Used by the
cache key builders and the tenant-scoped routes.
"""

# Cache key prefixes (joined with the tenant id, e.g. tenant_1, analytics_1)
CACHE_PREFIX_TENANT = "tenant"
CACHE_PREFIX_ANALYTICS = "analytics"
CACHE_PREFIX_USERS = "users"

# Delimiter for composite keys
CACHE_KEY_SEP = "_"

# Feature flags gating tenant-scoped routes
FEATURE_ANALYTICS = "analytics"
FEATURE_USER_MANAGEMENT = "userManagement"
FEATURE_CHAT = "chat"

# Real-time channel event names
EVENT_JOIN_TENANT_ROOM = "joinTenantRoom"
EVENT_LEAVE_TENANT_ROOM = "leaveTenantRoom"
EVENT_NOTIFICATION = "notification"
EVENT_ERROR = "error"

TENANT_ID_REQUIRED_MESSAGE = "Tenant ID is required"
