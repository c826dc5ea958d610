"""Tenant ID format validation.

Directory identifiers are numeric; the inbound identifier is a string that
must parse to one. Used by TenantResolver before any cache or directory access.
"""

import re

TENANT_ID_MAX_LENGTH = 18
_TENANT_ID_RE = re.compile(r"^[0-9]{1," + str(TENANT_ID_MAX_LENGTH) + r"}$")


def is_valid_tenant_id_format(value: object) -> bool:
    """Return True if value is a non-empty string of decimal digits."""
    if not isinstance(value, str) or not value:
        return False
    return bool(_TENANT_ID_RE.fullmatch(value))
