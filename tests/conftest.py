"""Shared fixtures for the travel journeys test suite."""

import pytest

from travel_journeys.config import reset_config
from travel_journeys.container import reset_container
from travel_journeys.domain.models import FlatSegment


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts with configuration read from a clean environment."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def make_segment():
    """Factory for flat segments with sequential ids."""
    counter = {"n": 0}

    def _make(segment_type, from_location="", to_location="", **kwargs):
        counter["n"] += 1
        kwargs.setdefault("id", f"seg-{counter['n']}")
        return FlatSegment(
            type=segment_type,
            from_location=from_location,
            to_location=to_location,
            **kwargs,
        )

    return _make


@pytest.fixture
def scenario_payload():
    """Taxi to the airport followed by a direct flight."""
    return [
        {
            "type": "taxi",
            "fromLocation": "Home",
            "toLocation": "LHR",
            "departureTime": "08:00",
        },
        {
            "type": "flight",
            "fromLocation": "LHR",
            "toLocation": "CDG",
            "departureTime": "10:00",
            "arrivalTime": "11:30",
            "flightNumber": "BA1234",
        },
    ]
