"""Invariant-preserving edits on legs and transfers.

Every operation is a pure function returning a new value. Requests that
would break an invariant (removing the last leg, moving past either end
of a list, unknown ids) return the input unchanged instead of raising.

Invariants kept after each call:
- legs are numbered 1..n and ``is_connecting == len(legs) > 1``;
- transfer ``order`` values are exactly 0..n-1 and follow list position.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Sequence

from ..domain.models import (
    AdditionalTravelSegment,
    JourneyTravel,
    MainTransport,
    MainTransportType,
    SegmentType,
    TransferDirection,
    TransferSegment,
    TransferType,
    TransportLeg,
)
from .factories import create_empty_leg, create_empty_transfer

_PROTECTED_FIELDS = frozenset({"id", "leg_number", "order"})

MIN_ADDITIONAL_CONNECTING_LEGS = 2


def _check_fields(changes: dict[str, Any]) -> None:
    protected = _PROTECTED_FIELDS.intersection(changes)
    if protected:
        raise ValueError(f"Fields derived from position cannot be set: {sorted(protected)}")


def renumber_legs(legs: Sequence[TransportLeg]) -> tuple[TransportLeg, ...]:
    return tuple(
        leg if leg.leg_number == number else replace(leg, leg_number=number)
        for number, leg in enumerate(legs, start=1)
    )


def _with_legs(transport: MainTransport, legs: Sequence[TransportLeg]) -> MainTransport:
    numbered = renumber_legs(legs)
    return replace(transport, legs=numbered, is_connecting=len(numbered) > 1)


# ---------------------------------------------------------------------------
# Main transport
# ---------------------------------------------------------------------------

def change_transport_type(
    transport: MainTransport,
    transport_type: MainTransportType,
) -> MainTransport:
    """Switch type, discarding every leg in favour of one empty leg.

    Airport and station field sets differ, so old leg data would be
    misleading under the new type.
    """
    return replace(
        transport,
        type=MainTransportType(transport_type),
        legs=(create_empty_leg(1),),
        is_connecting=False,
    )


def set_connecting(transport: MainTransport, connecting: bool) -> MainTransport:
    """Toggle the connecting flag.

    On: a single-leg transport gains an empty second leg; already
    connecting transports are left alone. Off: only the first leg stays.
    """
    if connecting:
        if len(transport.legs) > 1:
            return transport
        return _with_legs(transport, (*transport.legs, create_empty_leg(len(transport.legs) + 1)))
    return _with_legs(transport, transport.legs[:1])


def add_leg(transport: MainTransport) -> MainTransport:
    return _with_legs(transport, (*transport.legs, create_empty_leg(len(transport.legs) + 1)))


def remove_leg(transport: MainTransport, leg_id: str) -> MainTransport:
    """Remove a leg; refused when it is the only one or is unknown."""
    if len(transport.legs) <= 1:
        return transport
    remaining = tuple(leg for leg in transport.legs if leg.id != leg_id)
    if len(remaining) == len(transport.legs):
        return transport
    return _with_legs(transport, remaining)


def update_leg(transport: MainTransport, leg_id: str, **changes: Any) -> MainTransport:
    """Set leg fields such as times or airports; ``leg_number`` is derived."""
    _check_fields(changes)
    legs = tuple(
        replace(leg, **changes) if leg.id == leg_id else leg for leg in transport.legs
    )
    return replace(transport, legs=legs)


def move_leg(transport: MainTransport, from_index: int, to_index: int) -> MainTransport:
    legs = _move(transport.legs, from_index, to_index)
    if legs is None:
        return transport
    return _with_legs(transport, legs)


# ---------------------------------------------------------------------------
# Transfers
# ---------------------------------------------------------------------------

def sort_transfers(transfers: Sequence[TransferSegment]) -> tuple[TransferSegment, ...]:
    """Display order; stable for equal ``order`` values."""
    return tuple(sorted(transfers, key=lambda transfer: transfer.order))


def renumber_transfers(transfers: Sequence[TransferSegment]) -> tuple[TransferSegment, ...]:
    return tuple(
        transfer if transfer.order == order else replace(transfer, order=order)
        for order, transfer in enumerate(transfers)
    )


def add_transfer(
    transfers: Sequence[TransferSegment],
    transfer_type: TransferType = TransferType.TAXI,
) -> tuple[TransferSegment, ...]:
    """Append an empty transfer at the end of the group."""
    ordered = renumber_transfers(sort_transfers(transfers))
    return (*ordered, create_empty_transfer(len(ordered), transfer_type))


def remove_transfer(
    transfers: Sequence[TransferSegment],
    transfer_id: str,
) -> tuple[TransferSegment, ...]:
    remaining = [transfer for transfer in sort_transfers(transfers) if transfer.id != transfer_id]
    return renumber_transfers(remaining)


def reorder_transfers(
    transfers: Sequence[TransferSegment],
    from_index: int,
    to_index: int,
) -> tuple[TransferSegment, ...]:
    """Drag-and-drop move between display positions."""
    ordered = sort_transfers(transfers)
    moved = _move(ordered, from_index, to_index)
    return renumber_transfers(moved if moved is not None else ordered)


def move_transfer(
    transfers: Sequence[TransferSegment],
    transfer_id: str,
    step: int,
) -> tuple[TransferSegment, ...]:
    """Move a transfer up (``step=-1``) or down (``step=1``)."""
    ordered = sort_transfers(transfers)
    for index, transfer in enumerate(ordered):
        if transfer.id == transfer_id:
            return reorder_transfers(ordered, index, index + step)
    return renumber_transfers(ordered)


def update_transfer(
    transfers: Sequence[TransferSegment],
    transfer_id: str,
    **changes: Any,
) -> tuple[TransferSegment, ...]:
    _check_fields(changes)
    if "type" in changes:
        changes["type"] = TransferType(changes["type"])
    return tuple(
        replace(transfer, **changes) if transfer.id == transfer_id else transfer
        for transfer in transfers
    )


def update_journey_transfers(
    journey: JourneyTravel,
    direction: TransferDirection,
    transfers: Sequence[TransferSegment],
) -> JourneyTravel:
    if TransferDirection(direction) == TransferDirection.TO:
        return replace(journey, transfers_to=tuple(transfers))
    return replace(journey, transfers_from=tuple(transfers))


def update_journey_main_transport(
    journey: JourneyTravel,
    transport: MainTransport,
) -> JourneyTravel:
    return replace(journey, main_transport=transport)


# ---------------------------------------------------------------------------
# Additional travel
# ---------------------------------------------------------------------------

def change_additional_type(
    segment: AdditionalTravelSegment,
    transport_type: SegmentType,
) -> AdditionalTravelSegment:
    return replace(segment, type=SegmentType(transport_type), is_connecting=False, legs=None)


def set_additional_connecting(
    segment: AdditionalTravelSegment,
    connecting: bool,
) -> AdditionalTravelSegment:
    """On: two empty legs replace the route fields. Off: legs are dropped."""
    if not connecting:
        return replace(segment, is_connecting=False, legs=None)
    if segment.is_connecting and segment.legs:
        return segment
    return replace(
        segment,
        is_connecting=True,
        legs=(create_empty_leg(1), create_empty_leg(2)),
    )


def add_additional_leg(segment: AdditionalTravelSegment) -> AdditionalTravelSegment:
    if not segment.is_connecting or not segment.legs:
        return segment
    legs = (*segment.legs, create_empty_leg(len(segment.legs) + 1))
    return replace(segment, legs=renumber_legs(legs))


def remove_additional_leg(
    segment: AdditionalTravelSegment,
    leg_id: str,
) -> AdditionalTravelSegment:
    """Remove a leg; a connecting entry always keeps at least two."""
    if not segment.legs or len(segment.legs) <= MIN_ADDITIONAL_CONNECTING_LEGS:
        return segment
    remaining = tuple(leg for leg in segment.legs if leg.id != leg_id)
    if len(remaining) == len(segment.legs):
        return segment
    return replace(segment, legs=renumber_legs(remaining))


def _move(items: Sequence[Any], from_index: int, to_index: int) -> tuple[Any, ...] | None:
    size = len(items)
    if not (0 <= from_index < size and 0 <= to_index < size):
        return None
    result = list(items)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return tuple(result)
