"""Locally-unique identifiers for newly created segments, legs and transfers."""

from __future__ import annotations

import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def _random_suffix(length: int) -> str:
    return "".join(random.choices(_ALPHABET, k=length))


def generate_id() -> str:
    """Return ``"<epoch-millis>-<7 base36 chars>"``.

    Ids only need to be unique within one editing session and are never
    regenerated for an entity that already has one.
    """
    return f"{time.time_ns() // 1_000_000}-{_random_suffix(7)}"


def generate_segment_id() -> str:
    """Id for a flat segment synthesized from a legacy record."""
    return f"segment-{time.time_ns() // 1_000_000}-{_random_suffix(5)}"
