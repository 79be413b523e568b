"""Tenant ID format validation for the tenant header.

Rejects malformed IDs before any lookup, so arbitrary header text never
reaches a query or a log line.
"""

import re

# CUID/UUID-style: alphanumeric, hyphen, underscore.
TENANT_ID_MAX_LENGTH = 64
_TENANT_ID_RE = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(TENANT_ID_MAX_LENGTH) + r"}$"
)


def is_valid_tenant_id_format(value: str) -> bool:
    """Return True if value looks like a tenant ID (see TENANT_ID_MAX_LENGTH)."""
    return bool(value) and bool(_TENANT_ID_RE.fullmatch(value))
