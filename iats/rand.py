"""Random numbers from the system's secure source."""

from __future__ import annotations

import secrets


def rand_u32() -> int:
    """A random unsigned 32-bit integer."""
    return secrets.randbits(32)