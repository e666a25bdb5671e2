#!/usr/bin/env python3
"""
identifiers.py
--------------
Time-ordered identifiers for published pages and posts.

Published files are named with a version 7 UUID (48-bit Unix millisecond
timestamp followed by random bits), so a directory listing sorted by name
is also sorted by creation time. Identifiers minted within the same
millisecond stay ordered through a 12-bit sequence counter.

Functions:
    uuid7: Mint a new time-ordered UUID
    new_identifier: Mint a new identifier string
    is_identifier: Check whether a file stem is a canonical UUID
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
import threading
import time
import uuid

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

_lock = threading.Lock()
_last_timestamp = -1
_sequence = 0


def uuid7() -> uuid.UUID:
    """Mint a version 7 UUID that sorts after every previously minted one."""
    global _last_timestamp, _sequence

    with _lock:
        timestamp = time.time_ns() // 1_000_000
        if timestamp > _last_timestamp:
            _sequence = int.from_bytes(os.urandom(2), "big") & 0x7FF
        else:
            timestamp = _last_timestamp
            _sequence += 1
            if _sequence > 0xFFF:
                timestamp += 1
                _sequence = 0
        _last_timestamp = timestamp

    random_tail = int.from_bytes(os.urandom(8), "big") & ((1 << 62) - 1)
    value = (timestamp & ((1 << 48) - 1)) << 80
    value |= 0x7 << 76
    value |= _sequence << 64
    value |= 0b10 << 62
    value |= random_tail
    return uuid.UUID(int=value)


def new_identifier() -> str:
    """Return a fresh identifier string."""
    return str(uuid7())


def is_identifier(text: str) -> bool:
    """
    Check whether text is a canonical hyphenated UUID of any version.

    Examples:
        >>> is_identifier("0190b6a4-8f2e-7c1a-9d3b-5e6f7a8b9c0d")
        True
        >>> is_identifier("my-first-post")
        False
    """
    return bool(_UUID_RE.match(text))
