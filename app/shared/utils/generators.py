"""Primary key generation for tenant and participant rows (CUID2)."""

from cuid2 import Cuid

CUID_LENGTH = 25

_cuid = Cuid(length=CUID_LENGTH)


def generate_cuid() -> str:
    """Return a new collision-resistant, URL-safe CUID2 string."""
    return _cuid.generate()
