"""Immutable domain models for the travel journey engine.

All models are frozen dataclasses with slots. Collections are tuples,
so every edit produces a new value through ``dataclasses.replace``.
These models have no external dependencies and represent the core
business concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MainTransportType(str, Enum):
    """Primary transport of one journey direction."""

    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    FERRY = "ferry"
    OTHER = "other"


class TransferType(str, Enum):
    """Short connecting trip to or from a transport hub."""

    TAXI = "taxi"
    PRIVATE_CAR = "private_car"
    SHUTTLE = "shuttle"
    BUS = "bus"
    TRAIN = "train"
    OTHER = "other"


class SegmentType(str, Enum):
    """Transport type of a flat segment or an additional travel entry."""

    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    FERRY = "ferry"
    TAXI = "taxi"
    PRIVATE_TRANSFER = "private_transfer"
    SHUTTLE = "shuttle"
    CAR_RENTAL = "car_rental"
    OTHER = "other"


class SegmentRole(str, Enum):
    """Optional structural hint written on flat segments."""

    MAIN = "main"
    TRANSFER = "transfer"


class Direction(str, Enum):
    OUTBOUND = "outbound"
    RETURN = "return"


class TransferDirection(str, Enum):
    TO = "to"
    FROM = "from"


@dataclass(frozen=True, slots=True)
class FlatSegment:
    """A single generic travel hop, as persisted.

    An ordered tuple of these is the canonical representation of one
    journey direction. ``type`` is kept as a plain string so unknown
    values coming from older records survive a load.

    Attributes:
        id: Segment identifier
        type: Transport type (usually a SegmentType value)
        from_location: Where the hop starts
        to_location: Where the hop ends
        date: Travel date as entered
        role: Optional main/transfer hint
    """

    id: str
    type: str
    from_location: str = ""
    to_location: str = ""
    date: str = ""
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    flight_number: Optional[str] = None
    airline: Optional[str] = None
    company: Optional[str] = None
    booking_reference: Optional[str] = None
    confirmation_number: Optional[str] = None
    contact_details: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[str] = None
    role: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TransferSegment:
    """A transfer to or from the main transport hub.

    ``order`` defines the sequence inside its group and is always a pure
    function of the position once the group has been edited.
    """

    id: str
    order: int
    type: TransferType = TransferType.TAXI
    pickup_location: str = ""
    pickup_time: str = ""
    dropoff_location: str = ""
    company: Optional[str] = None
    contact: Optional[str] = None
    vehicle_registration: Optional[str] = None
    booking_reference: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TransportLeg:
    """One directly-bookable hop of a main transport.

    Only one of the airport pair (flights) or the station pair (every
    other type) is meaningful, selected by the parent transport type.
    """

    id: str
    leg_number: int
    flight_number: Optional[str] = None
    airline: Optional[str] = None
    departure_airport: Optional[str] = None
    arrival_airport: Optional[str] = None
    departure_station: Optional[str] = None
    arrival_station: Optional[str] = None
    company: Optional[str] = None
    departure_time: str = ""
    arrival_time: str = ""

    def departure_point(self, transport_type: str) -> str:
        """Departure airport or station, depending on the parent type."""
        if transport_type == MainTransportType.FLIGHT:
            return self.departure_airport or ""
        return self.departure_station or ""

    def arrival_point(self, transport_type: str) -> str:
        """Arrival airport or station, depending on the parent type."""
        if transport_type == MainTransportType.FLIGHT:
            return self.arrival_airport or ""
        return self.arrival_station or ""


@dataclass(frozen=True, slots=True)
class MainTransport:
    """Primary transport for one direction of travel.

    Attributes:
        id: Identifier
        type: Transport type shared by every leg
        date: Travel date
        is_connecting: Cached ``len(legs) > 1``
        legs: Legs numbered 1..n
    """

    id: str
    type: MainTransportType = MainTransportType.FLIGHT
    date: str = ""
    is_connecting: bool = False
    legs: tuple[TransportLeg, ...] = field(default_factory=tuple)
    passengers_and_seats: Optional[str] = None
    booking_reference: Optional[str] = None
    contact: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_flight(self) -> bool:
        return self.type == MainTransportType.FLIGHT

    @property
    def origin(self) -> str:
        """Departure point of the first leg."""
        if not self.legs:
            return ""
        return self.legs[0].departure_point(self.type)

    @property
    def destination(self) -> str:
        """Arrival point of the last leg."""
        if not self.legs:
            return ""
        return self.legs[-1].arrival_point(self.type)


@dataclass(frozen=True, slots=True)
class JourneyTravel:
    """Structured view of one direction (outbound or return)."""

    transfers_to: tuple[TransferSegment, ...] = field(default_factory=tuple)
    main_transport: Optional[MainTransport] = None
    transfers_from: tuple[TransferSegment, ...] = field(default_factory=tuple)

    def transfers(self, direction: TransferDirection) -> tuple[TransferSegment, ...]:
        if direction == TransferDirection.TO:
            return self.transfers_to
        return self.transfers_from


@dataclass(frozen=True, slots=True)
class AdditionalTravelSegment:
    """A standalone travel entry outside outbound and return.

    When ``is_connecting`` is set, ``legs`` holds at least two legs;
    otherwise ``legs`` is None and the route lives in
    ``from_location`` / ``to_location``.
    """

    id: str
    type: SegmentType = SegmentType.FLIGHT
    date: str = ""
    from_location: str = ""
    to_location: str = ""
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    flight_number: Optional[str] = None
    airline: Optional[str] = None
    is_connecting: bool = False
    legs: Optional[tuple[TransportLeg, ...]] = None
    destination_id: Optional[str] = None
    company: Optional[str] = None
    booking_reference: Optional[str] = None
    contact: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SegmentClassification:
    """Result of splitting flat segments into main transport and transfers.

    Attributes:
        main_type: Type shared by the main segments, None when there are none
        main_segments: Segments that become legs, in array order
        transfers_to: Transfer segments placed before the main transport
        transfers_from: Transfer segments placed after the main transport
        dropped: Segments that fit neither group
    """

    main_type: Optional[str] = None
    main_segments: tuple[FlatSegment, ...] = field(default_factory=tuple)
    transfers_to: tuple[FlatSegment, ...] = field(default_factory=tuple)
    transfers_from: tuple[FlatSegment, ...] = field(default_factory=tuple)
    dropped: tuple[FlatSegment, ...] = field(default_factory=tuple)

    @property
    def has_main_transport(self) -> bool:
        return len(self.main_segments) > 0


@dataclass(frozen=True, slots=True)
class ItineraryTravel:
    """Persisted travel data of one itinerary."""

    outbound: tuple[FlatSegment, ...] = field(default_factory=tuple)
    return_: tuple[FlatSegment, ...] = field(default_factory=tuple)
    additional: tuple[AdditionalTravelSegment, ...] = field(default_factory=tuple)

    def segments(self, direction: Direction) -> tuple[FlatSegment, ...]:
        if direction == Direction.OUTBOUND:
            return self.outbound
        return self.return_

    @property
    def is_empty(self) -> bool:
        return not (self.outbound or self.return_ or self.additional)
