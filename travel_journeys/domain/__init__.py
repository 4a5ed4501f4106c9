"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ItineraryNotFoundError,
    SegmentFormatError,
    StoreError,
    TravelJourneyError,
    UnknownTransportTypeError,
)
from .models import (
    AdditionalTravelSegment,
    Direction,
    FlatSegment,
    ItineraryTravel,
    JourneyTravel,
    MainTransport,
    MainTransportType,
    SegmentClassification,
    SegmentRole,
    SegmentType,
    TransferDirection,
    TransferSegment,
    TransferType,
    TransportLeg,
)

__all__ = [
    # Models
    "FlatSegment",
    "TransferSegment",
    "TransportLeg",
    "MainTransport",
    "JourneyTravel",
    "AdditionalTravelSegment",
    "SegmentClassification",
    "ItineraryTravel",
    # Enums
    "MainTransportType",
    "TransferType",
    "SegmentType",
    "SegmentRole",
    "Direction",
    "TransferDirection",
    # Errors
    "TravelJourneyError",
    "SegmentFormatError",
    "UnknownTransportTypeError",
    "StoreError",
    "ItineraryNotFoundError",
    "ConfigurationError",
]
