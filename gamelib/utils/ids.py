"""Random identifiers."""

from __future__ import annotations

import uuid


def uuid4_str() -> str:
    """Return a new random version-4 UUID in its canonical text form."""
    return str(uuid.uuid4())