"""Assemble a structured JourneyTravel from flat segments."""

from __future__ import annotations

import logging
from typing import Sequence

from ..domain.models import (
    FlatSegment,
    JourneyTravel,
    MainTransport,
    MainTransportType,
    TransferSegment,
    TransferType,
    TransportLeg,
)
from .classifier import classify_segments
from .factories import create_empty_main_transport
from .ids import generate_id

logger = logging.getLogger(__name__)


def _transfer_type(segment_type: str) -> TransferType:
    try:
        return TransferType(segment_type)
    except ValueError:
        return TransferType.TAXI


def segment_to_transfer(segment: FlatSegment, order: int) -> TransferSegment:
    return TransferSegment(
        id=segment.id or generate_id(),
        order=order,
        type=_transfer_type(segment.type),
        pickup_location=segment.from_location or "",
        pickup_time=segment.departure_time or "",
        dropoff_location=segment.to_location or "",
        company=segment.company,
        contact=segment.contact_details,
        vehicle_registration=segment.confirmation_number,
        booking_reference=segment.booking_reference,
        price=segment.price,
        notes=segment.notes,
    )


def segment_to_leg(
    segment: FlatSegment,
    leg_number: int,
    main_type: MainTransportType,
) -> TransportLeg:
    """One leg; airport fields for flights, station fields otherwise."""
    common = dict(
        id=segment.id or generate_id(),
        leg_number=leg_number,
        departure_time=segment.departure_time or "",
        arrival_time=segment.arrival_time or "",
    )
    if main_type == MainTransportType.FLIGHT:
        return TransportLeg(
            **common,
            flight_number=segment.flight_number,
            airline=segment.airline,
            departure_airport=segment.from_location,
            arrival_airport=segment.to_location,
        )
    return TransportLeg(
        **common,
        departure_station=segment.from_location,
        arrival_station=segment.to_location,
        company=segment.company,
    )


def build_main_transport(
    main_type: MainTransportType,
    segments: Sequence[FlatSegment],
) -> MainTransport:
    """Main transport whose legs are ``segments`` in order.

    Booking reference, notes, contact and passengers come from the first
    segment only; a single reservation is not repeated across legs.
    """
    first = segments[0]
    legs = tuple(
        segment_to_leg(segment, number, main_type)
        for number, segment in enumerate(segments, start=1)
    )
    return MainTransport(
        id=first.id or generate_id(),
        type=main_type,
        date=first.date or "",
        is_connecting=len(legs) > 1,
        legs=legs,
        passengers_and_seats=first.confirmation_number,
        booking_reference=first.booking_reference,
        contact=first.contact_details,
        notes=first.notes,
    )


def segments_to_journey(
    segments: Sequence[FlatSegment],
    default_main_type: MainTransportType = MainTransportType.FLIGHT,
) -> JourneyTravel:
    """Build the structured journey for one direction.

    Args:
        segments: Flat segments in persisted order.
        default_main_type: Type of the empty main transport synthesized
            when no segment qualifies as main transport.

    Returns:
        JourneyTravel with both transfer groups numbered from 0.
    """
    classification = classify_segments(segments)

    if classification.has_main_transport and classification.main_type is not None:
        main_transport = build_main_transport(
            MainTransportType(classification.main_type),
            classification.main_segments,
        )
    else:
        main_transport = create_empty_main_transport(default_main_type)

    journey = JourneyTravel(
        transfers_to=tuple(
            segment_to_transfer(segment, order)
            for order, segment in enumerate(classification.transfers_to)
        ),
        main_transport=main_transport,
        transfers_from=tuple(
            segment_to_transfer(segment, order)
            for order, segment in enumerate(classification.transfers_from)
        ),
    )
    logger.debug(
        "Journey built",
        extra={
            "segments": len(segments),
            "main_type": main_transport.type.value,
            "legs": len(main_transport.legs),
            "transfers_to": len(journey.transfers_to),
            "transfers_from": len(journey.transfers_from),
        },
    )
    return journey
