"""Serialize a JourneyTravel back into flat segments.

Structural inverse of ``segments_to_journey``: transfers-to, then one
segment per main-transport leg, then transfers-from. Segments carry a
``role`` hint so the classifier can recover the structure exactly.
"""

from __future__ import annotations

from typing import Iterable

from ..domain.models import (
    FlatSegment,
    JourneyTravel,
    MainTransport,
    SegmentRole,
    TransferSegment,
    TransferType,
)

WIRE_TRANSFER_TYPES = frozenset({TransferType.TAXI, TransferType.TRAIN})


def _wire_transfer_type(transfer_type: TransferType) -> str:
    if transfer_type in WIRE_TRANSFER_TYPES:
        return TransferType(transfer_type).value
    return TransferType.TAXI.value


def transfer_to_segment(transfer: TransferSegment, date: str) -> FlatSegment:
    return FlatSegment(
        id=transfer.id,
        role=SegmentRole.TRANSFER.value,
        type=_wire_transfer_type(transfer.type),
        from_location=transfer.pickup_location,
        to_location=transfer.dropoff_location,
        date=date,
        departure_time=transfer.pickup_time,
        company=transfer.company,
        contact_details=transfer.contact,
        confirmation_number=transfer.vehicle_registration,
        booking_reference=transfer.booking_reference,
        price=transfer.price,
        notes=transfer.notes,
    )


def main_transport_to_segments(main_transport: MainTransport) -> tuple[FlatSegment, ...]:
    """One flat segment per leg, reservation details on the first only."""
    segments = []
    for index, leg in enumerate(main_transport.legs):
        first = index == 0
        segments.append(
            FlatSegment(
                id=leg.id,
                role=SegmentRole.MAIN.value,
                type=main_transport.type.value,
                date=main_transport.date,
                from_location=leg.departure_point(main_transport.type),
                to_location=leg.arrival_point(main_transport.type),
                departure_time=leg.departure_time,
                arrival_time=leg.arrival_time,
                flight_number=leg.flight_number if main_transport.is_flight else None,
                airline=leg.airline if main_transport.is_flight else None,
                company=None if main_transport.is_flight else leg.company,
                confirmation_number=main_transport.passengers_and_seats if first else None,
                booking_reference=main_transport.booking_reference if first else None,
                contact_details=main_transport.contact if first else None,
                notes=main_transport.notes if first else None,
            )
        )
    return tuple(segments)


def _sorted(transfers: Iterable[TransferSegment]) -> list[TransferSegment]:
    return sorted(transfers, key=lambda transfer: transfer.order)


def journey_to_segments(journey: JourneyTravel) -> tuple[FlatSegment, ...]:
    """Flatten one direction for persistence.

    Args:
        journey: The structured journey.

    Returns:
        Flat segments: transfers-to by order, legs, transfers-from by order.
    """
    date = journey.main_transport.date if journey.main_transport else ""

    segments: list[FlatSegment] = [
        transfer_to_segment(transfer, date) for transfer in _sorted(journey.transfers_to)
    ]
    if journey.main_transport is not None:
        segments.extend(main_transport_to_segments(journey.main_transport))
    segments.extend(
        transfer_to_segment(transfer, date) for transfer in _sorted(journey.transfers_from)
    )
    return tuple(segments)
