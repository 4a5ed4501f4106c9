"""Display labels and icon names for transport types.

Each lookup is an exhaustive ``match`` over a closed enum, so adding a
member to one of the enums makes the type checker flag every lookup
that has not been updated.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar, Union, assert_never

from ..domain.errors import UnknownTransportTypeError
from ..domain.models import MainTransportType, SegmentType, TransferDirection, TransferType

E = TypeVar("E", bound=Enum)

TransportTypeLike = Union[MainTransportType, SegmentType, str]


def _coerce(enum_cls: type[E], value: Union[Enum, str]) -> E:
    raw = value.value if isinstance(value, Enum) else value
    try:
        return enum_cls(raw)
    except ValueError as e:
        raise UnknownTransportTypeError(
            f"Unknown {enum_cls.__name__} value {raw!r}",
            value=str(raw),
            cause=e,
        )


def get_transport_hub_name(transport_type: TransportTypeLike) -> str:
    """Name of the hub a transfer heads to for this transport type."""
    kind = _coerce(SegmentType, transport_type)
    match kind:
        case SegmentType.FLIGHT:
            return "Airport"
        case SegmentType.TRAIN | SegmentType.BUS:
            return "Station"
        case SegmentType.FERRY:
            return "Port"
        case (
            SegmentType.TAXI
            | SegmentType.PRIVATE_TRANSFER
            | SegmentType.SHUTTLE
            | SegmentType.CAR_RENTAL
            | SegmentType.OTHER
        ):
            return "Departure Point"
        case _:
            assert_never(kind)


def get_transfer_section_label(
    main_type: TransportTypeLike,
    direction: Union[TransferDirection, str],
) -> str:
    """Heading of a transfer group, e.g. ``"Transfers to Airport"``."""
    hub = get_transport_hub_name(main_type)
    side = _coerce(TransferDirection, direction)
    match side:
        case TransferDirection.TO:
            return f"Transfers to {hub}"
        case TransferDirection.FROM:
            return f"Transfers from {hub}"
        case _:
            assert_never(side)


def get_transport_label(transport_type: TransportTypeLike) -> str:
    kind = _coerce(SegmentType, transport_type)
    match kind:
        case SegmentType.FLIGHT:
            return "Flight"
        case SegmentType.TRAIN:
            return "Train"
        case SegmentType.BUS:
            return "Bus"
        case SegmentType.FERRY:
            return "Ferry"
        case SegmentType.TAXI:
            return "Taxi"
        case SegmentType.PRIVATE_TRANSFER:
            return "Private Transfer"
        case SegmentType.SHUTTLE:
            return "Shuttle"
        case SegmentType.CAR_RENTAL:
            return "Car Rental"
        case SegmentType.OTHER:
            return "Other"
        case _:
            assert_never(kind)


def get_transfer_label(transfer_type: Union[TransferType, str]) -> str:
    kind = _coerce(TransferType, transfer_type)
    match kind:
        case TransferType.TAXI:
            return "Taxi"
        case TransferType.PRIVATE_CAR:
            return "Private Car"
        case TransferType.SHUTTLE:
            return "Shuttle"
        case TransferType.BUS:
            return "Bus"
        case TransferType.TRAIN:
            return "Train"
        case TransferType.OTHER:
            return "Other"
        case _:
            assert_never(kind)


def get_transport_icon(transport_type: TransportTypeLike) -> str:
    """Icon name used by card components."""
    kind = _coerce(SegmentType, transport_type)
    match kind:
        case SegmentType.FLIGHT:
            return "plane"
        case SegmentType.TRAIN:
            return "train"
        case SegmentType.BUS:
            return "bus"
        case SegmentType.FERRY:
            return "ship"
        case SegmentType.TAXI | SegmentType.PRIVATE_TRANSFER | SegmentType.SHUTTLE:
            return "car"
        case SegmentType.CAR_RENTAL:
            return "key"
        case SegmentType.OTHER:
            return "route"
        case _:
            assert_never(kind)
