"""Layover arithmetic between consecutive legs.

Times are same-day ``HH:mm`` wall-clock strings. Legs carry no date of
their own, so a departure earlier than the previous arrival is taken to
be on the next day.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from ..domain.models import TransportLeg

MINUTES_PER_DAY = 24 * 60
LAYOVER_PLACEHOLDER = "Layover"

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def parse_minutes(value: Optional[str]) -> Optional[int]:
    """Convert ``HH:mm`` to minutes since midnight, None if unparseable."""
    if not value:
        return None
    match = _TIME_RE.match(value)
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def format_duration(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    if hours == 0:
        return f"{minutes}min"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}min"


def calculate_layover(arrival_time: Optional[str], departure_time: Optional[str]) -> str:
    """Duration between an arrival and the next departure.

    Returns ``"<m>min"``, ``"<h>h"`` or ``"<h>h <m>min"``, or an empty
    string when either time is missing or malformed.

    >>> calculate_layover("23:50", "00:20")
    '30min'
    >>> calculate_layover("10:00", "12:30")
    '2h 30min'
    """
    arrival = parse_minutes(arrival_time)
    departure = parse_minutes(departure_time)
    if arrival is None or departure is None:
        return ""

    gap = departure - arrival
    if gap < 0:
        gap += MINUTES_PER_DAY
    return format_duration(gap)


def describe_layover(arrival_time: Optional[str], departure_time: Optional[str]) -> str:
    """Display text for the gap between two legs."""
    duration = calculate_layover(arrival_time, departure_time)
    if not duration:
        return LAYOVER_PLACEHOLDER
    return f"{LAYOVER_PLACEHOLDER}: {duration}"


def leg_layovers(legs: Sequence[TransportLeg]) -> tuple[str, ...]:
    """Layover before each leg after the first (``len(legs) - 1`` entries)."""
    return tuple(
        calculate_layover(previous.arrival_time, current.departure_time)
        for previous, current in zip(legs, legs[1:])
    )
