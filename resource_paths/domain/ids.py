from __future__ import annotations

import re

__all__ = [
    "UUID_RE",
    "looks_like_uuid",
]

# Canonical 8-4-4-4-12 hex form; case-insensitive so upper-case ids from other systems pass.
UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def looks_like_uuid(value: str | None) -> bool:
    """Return True if all of `value` has the shape of a UUID (no version check).

    fullmatch, not match with "$": "$" would also accept a trailing newline.
    """
    if not value:
        return False
    return UUID_RE.fullmatch(value) is not None
