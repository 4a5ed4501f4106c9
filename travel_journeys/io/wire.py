"""JSON-shaped wire format for journey data.

Structured journeys, additional travel and whole itinerary documents,
built on the flat segment codec in ``io.segments`` and using the same
camelCase keys and leniency rules. Leg numbers are always recomputed
from position on decode.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ..domain.errors import SegmentFormatError
from ..domain.models import (
    AdditionalTravelSegment,
    FlatSegment,
    ItineraryTravel,
    JourneyTravel,
    MainTransport,
    MainTransportType,
    SegmentType,
    TransferSegment,
    TransferType,
    TransportLeg,
)
from ..journey.additional import is_unified_record, legacy_to_additional_travel
from ..journey.editing import renumber_legs
from ..journey.ids import generate_id
from ..journey.legacy import outbound_to_segments, return_to_segments
from .segments import (
    encode_fields,
    int_value,
    read_text_fields,
    require_list,
    require_mapping,
    segment_from_dict,
    segment_to_dict,
    segments_from_list,
    segments_to_list,
    text_value,
    to_camel,
)

OUTBOUND_KEY = "outboundJourney"
RETURN_KEY = "returnJourney"
ADDITIONAL_KEY = "additionalTravel"
LEGACY_OUTBOUND_KEY = "outboundTravel"
LEGACY_RETURN_KEY = "returnTravel"

__all__ = [
    "to_camel",
    "segment_from_dict",
    "segment_to_dict",
    "segments_from_list",
    "segments_to_list",
    "leg_from_dict",
    "transfer_from_dict",
    "main_transport_from_dict",
    "journey_from_dict",
    "journey_to_dict",
    "additional_from_dict",
    "additional_to_dict",
    "additional_travel_from_list",
    "itinerary_to_dict",
    "itinerary_from_dict",
]


# ---------------------------------------------------------------------------
# Structured journey
# ---------------------------------------------------------------------------

def leg_from_dict(data: Any, default_number: int = 1) -> TransportLeg:
    record = require_mapping(data, "transport leg")
    values = read_text_fields(TransportLeg, record, skip=("id", "leg_number"))
    return TransportLeg(
        id=text_value(record.get("id")) or generate_id(),
        leg_number=int_value(record.get("legNumber"), default_number),
        **values,
    )


def transfer_from_dict(data: Any, default_order: int = 0) -> TransferSegment:
    record = require_mapping(data, "transfer")
    values = read_text_fields(TransferSegment, record, skip=("id", "order", "type"))
    try:
        transfer_type = TransferType(record.get("type") or TransferType.TAXI.value)
    except ValueError:
        transfer_type = TransferType.TAXI
    return TransferSegment(
        id=text_value(record.get("id")) or generate_id(),
        order=int_value(record.get("order"), default_order),
        type=transfer_type,
        **values,
    )


def main_transport_from_dict(data: Any) -> MainTransport:
    record = require_mapping(data, "main transport")
    raw_type = record.get("type") or MainTransportType.FLIGHT.value
    try:
        transport_type = MainTransportType(raw_type)
    except ValueError as e:
        raise SegmentFormatError(
            f"Unknown main transport type {raw_type!r}",
            payload_type=type(raw_type).__name__,
            cause=e,
        )
    legs = renumber_legs(
        [leg_from_dict(item) for item in require_list(record.get("legs"), "legs")]
    )
    values = read_text_fields(
        MainTransport, record, skip=("id", "type", "is_connecting", "legs")
    )
    return MainTransport(
        id=text_value(record.get("id")) or generate_id(),
        type=transport_type,
        is_connecting=len(legs) > 1,
        legs=legs,
        **values,
    )


def journey_from_dict(data: Any) -> JourneyTravel:
    record = require_mapping(data, "journey")
    main = record.get("mainTransport")
    return JourneyTravel(
        transfers_to=tuple(
            transfer_from_dict(item, order)
            for order, item in enumerate(require_list(record.get("transfersTo"), "transfersTo"))
        ),
        main_transport=main_transport_from_dict(main) if main is not None else None,
        transfers_from=tuple(
            transfer_from_dict(item, order)
            for order, item in enumerate(
                require_list(record.get("transfersFrom"), "transfersFrom")
            )
        ),
    )


def journey_to_dict(journey: JourneyTravel) -> dict[str, Any]:
    return encode_fields(journey)


# ---------------------------------------------------------------------------
# Additional travel
# ---------------------------------------------------------------------------

def additional_from_dict(data: Any) -> AdditionalTravelSegment:
    """Decode an entry already in the unified additional-travel shape."""
    record = require_mapping(data, "additional travel")
    try:
        segment_type = SegmentType(record.get("type") or SegmentType.FLIGHT.value)
    except ValueError:
        segment_type = SegmentType.OTHER
    raw_legs = require_list(record.get("legs"), "legs")
    legs = renumber_legs([leg_from_dict(item) for item in raw_legs])
    is_connecting = bool(record.get("isConnecting")) and len(legs) >= 2
    values = read_text_fields(
        AdditionalTravelSegment, record, skip=("id", "type", "is_connecting", "legs")
    )
    return AdditionalTravelSegment(
        id=text_value(record.get("id")) or generate_id(),
        type=segment_type,
        is_connecting=is_connecting,
        legs=legs if is_connecting else None,
        **values,
    )


def additional_to_dict(segment: AdditionalTravelSegment) -> dict[str, Any]:
    return encode_fields(segment)


def additional_travel_from_list(data: Any) -> tuple[AdditionalTravelSegment, ...]:
    """Decode stored additional travel, converting legacy per-type records."""
    result = []
    for item in require_list(data, "additional travel"):
        record = require_mapping(item, "additional travel")
        if is_unified_record(record):
            result.append(additional_from_dict(record))
        else:
            result.append(legacy_to_additional_travel(record))
    return tuple(result)


# ---------------------------------------------------------------------------
# Itinerary document
# ---------------------------------------------------------------------------

def itinerary_to_dict(travel: ItineraryTravel) -> dict[str, Any]:
    return {
        OUTBOUND_KEY: segments_to_list(travel.outbound),
        RETURN_KEY: segments_to_list(travel.return_),
        ADDITIONAL_KEY: [additional_to_dict(segment) for segment in travel.additional],
    }


def _direction_segments(
    record: Mapping[str, Any],
    key: str,
    legacy_key: str,
    convert: Callable[[Optional[Mapping[str, Any]]], tuple[FlatSegment, ...]],
) -> tuple[FlatSegment, ...]:
    """Stored segments, else the legacy single-record form of the direction."""
    segments = segments_from_list(record.get(key))
    if segments:
        return segments
    legacy = record.get(legacy_key)
    if not legacy:
        return ()
    return convert(require_mapping(legacy, legacy_key))


def itinerary_from_dict(data: Any) -> ItineraryTravel:
    """Decode an itinerary document.

    A direction whose segment array is missing or empty falls back to
    the legacy ``outboundTravel`` / ``returnTravel`` record, so older
    itineraries open with their travel intact.
    """
    record = require_mapping(data, "itinerary travel")
    return ItineraryTravel(
        outbound=_direction_segments(
            record, OUTBOUND_KEY, LEGACY_OUTBOUND_KEY, outbound_to_segments
        ),
        return_=_direction_segments(record, RETURN_KEY, LEGACY_RETURN_KEY, return_to_segments),
        additional=additional_travel_from_list(record.get(ADDITIONAL_KEY)),
    )
