"""Typed domain errors for the travel journey engine.

The conversion core degrades gracefully and never raises for
incomplete data. These errors exist only at the boundaries: decoding
wire payloads, looking up display labels and talking to a store.

All errors inherit from TravelJourneyError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TravelJourneyError(Exception):
    """Base error for the travel journey domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class SegmentFormatError(TravelJourneyError):
    """A wire payload does not have the expected JSON shape.

    Attributes:
        payload_type: Python type name of the offending value
    """

    payload_type: str = ""


@dataclass
class UnknownTransportTypeError(TravelJourneyError):
    """A transport type string is not part of the closed type set.

    Attributes:
        value: The rejected type value
    """

    value: str = ""


@dataclass
class StoreError(TravelJourneyError):
    """Reading or writing persisted travel data failed.

    Attributes:
        itinerary_id: Itinerary being read or written
        file_path: Path of the backing file if relevant
    """

    itinerary_id: str = ""
    file_path: Optional[str] = None


@dataclass
class ItineraryNotFoundError(StoreError):
    """The store holds nothing for the requested itinerary."""


@dataclass
class ConfigurationError(TravelJourneyError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
