"""Constructors for brand-new, empty journey entities."""

from __future__ import annotations

from ..domain.models import (
    AdditionalTravelSegment,
    JourneyTravel,
    MainTransport,
    MainTransportType,
    SegmentType,
    TransferSegment,
    TransferType,
    TransportLeg,
)
from .ids import generate_id


def create_empty_leg(leg_number: int) -> TransportLeg:
    return TransportLeg(id=generate_id(), leg_number=leg_number)


def create_empty_main_transport(
    transport_type: MainTransportType = MainTransportType.FLIGHT,
) -> MainTransport:
    """Single-leg main transport with no details filled in."""
    return MainTransport(
        id=generate_id(),
        type=MainTransportType(transport_type),
        is_connecting=False,
        legs=(create_empty_leg(1),),
    )


def create_empty_transfer(
    order: int = 0,
    transfer_type: TransferType = TransferType.TAXI,
) -> TransferSegment:
    return TransferSegment(
        id=generate_id(),
        order=order,
        type=TransferType(transfer_type),
    )


def create_empty_journey(
    transport_type: MainTransportType = MainTransportType.FLIGHT,
) -> JourneyTravel:
    """Journey shown on the first visit: no transfers, one empty leg."""
    return JourneyTravel(main_transport=create_empty_main_transport(transport_type))


def create_empty_additional_travel(
    transport_type: SegmentType = SegmentType.FLIGHT,
) -> AdditionalTravelSegment:
    return AdditionalTravelSegment(id=generate_id(), type=SegmentType(transport_type))
