"""Additional travel: legacy per-type records and date ordering.

Older itineraries stored each additional trip as one record with a
separate field set per transport type (``flightDepartureAirport``,
``ferryDepartingFrom``, ``trainDepartingFrom`` ...). Only the set
matching the chosen type is normally filled in, but nothing enforced
it, so every field is resolved with a fixed flight -> ferry -> train
precedence where the first non-empty value wins.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

import dateparser

from ..domain.models import AdditionalTravelSegment, SegmentType, TransportLeg
from .ids import generate_id

logger = logging.getLogger(__name__)

FROM_FIELDS = ("flightDepartureAirport", "ferryDepartingFrom", "trainDepartingFrom")
TO_FIELDS = ("flightArrivalAirport", "ferryDestination", "trainDestination")
DATE_FIELDS = ("flightDate", "ferryDate", "trainDate")
NOTES_FIELDS = ("flightThingsToRemember", "ferryAdditionalNotes", "trainAdditionalNotes")
BOOKING_FIELDS = ("ferryBookingReference", "trainBookingReference", "carBookingDetails")
CONTACT_FIELDS = ("ferryContactDetails", "trainContactDetails", "carContactDetails")
PRICE_FIELDS = ("ferryPrice", "trainPrice")

LEGACY_TYPES = {
    "flight": SegmentType.FLIGHT,
    "ferry": SegmentType.FERRY,
    "train": SegmentType.TRAIN,
    "car": SegmentType.CAR_RENTAL,
}


def select_primary_location_field(record: Mapping[str, Any], field_names: Sequence[str]) -> str:
    """Value of the first non-empty field in ``field_names``, else ``""``."""
    for name in field_names:
        value = record.get(name)
        if value is not None and str(value).strip():
            return str(value)
    return ""


def _optional(record: Mapping[str, Any], field_names: Sequence[str]) -> Optional[str]:
    return select_primary_location_field(record, field_names) or None


def _legacy_type(raw: Any) -> SegmentType:
    if not raw:
        return SegmentType.FLIGHT
    name = str(raw)
    try:
        return LEGACY_TYPES.get(name) or SegmentType(name)
    except ValueError:
        return SegmentType.OTHER


def _legacy_legs(record: Mapping[str, Any]) -> Optional[tuple[TransportLeg, ...]]:
    if not record.get("flightIsMultiLeg"):
        return None
    raw_legs = record.get("flightLegs") or []
    if not isinstance(raw_legs, (list, tuple)):
        return None
    usable = [leg for leg in raw_legs if isinstance(leg, Mapping)]
    if len(usable) < 2:
        return None
    return tuple(
        TransportLeg(
            id=generate_id(),
            leg_number=number,
            flight_number=leg.get("flightNumber") or None,
            departure_airport=leg.get("departureAirport") or "",
            arrival_airport=leg.get("arrivalAirport") or "",
            departure_time=leg.get("departureTime") or "",
            arrival_time=leg.get("arrivalTime") or "",
        )
        for number, leg in enumerate(usable, start=1)
    )


def legacy_to_additional_travel(record: Mapping[str, Any]) -> AdditionalTravelSegment:
    """Convert one legacy per-type record.

    A record with no type-specific field filled in still converts, to a
    segment with empty locations; completeness is checked by the form.
    """
    legs = _legacy_legs(record)
    is_connecting = legs is not None and len(legs) >= 2
    return AdditionalTravelSegment(
        id=generate_id(),
        type=_legacy_type(record.get("travelType")),
        date=select_primary_location_field(record, DATE_FIELDS),
        from_location=select_primary_location_field(record, FROM_FIELDS),
        to_location=select_primary_location_field(record, TO_FIELDS),
        departure_time=record.get("flightDepartureTime") or "",
        arrival_time=record.get("flightArrivalTime") or "",
        flight_number=record.get("flightNumber") or None,
        is_connecting=is_connecting,
        legs=legs if is_connecting else None,
        booking_reference=select_primary_location_field(record, BOOKING_FIELDS),
        contact=_optional(record, CONTACT_FIELDS),
        price=_optional(record, PRICE_FIELDS),
        notes=select_primary_location_field(record, NOTES_FIELDS),
    )


def is_unified_record(record: Mapping[str, Any]) -> bool:
    """Whether a stored record already has the unified shape."""
    return bool(record.get("type")) and "fromLocation" in record


def parse_travel_date(value: str, date_order: str = "DMY") -> Optional[datetime]:
    """ISO dates directly, anything else (``14/03/2025``, ``3 May``) via dateparser."""
    if not value or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).replace(tzinfo=None)
    except ValueError:
        pass
    return dateparser.parse(
        value,
        settings={"DATE_ORDER": date_order, "RETURN_AS_TIMEZONE_AWARE": False},
    )


def sort_additional_travel(
    segments: Sequence[AdditionalTravelSegment],
    date_order: str = "DMY",
) -> tuple[AdditionalTravelSegment, ...]:
    """Chronological order; undated or unreadable dates go last.

    The sort is stable, so entries on the same date keep their order.
    """
    keyed = []
    for position, segment in enumerate(segments):
        parsed = parse_travel_date(segment.date, date_order)
        if segment.date and parsed is None:
            logger.debug(
                "Unreadable additional travel date",
                extra={"segment_id": segment.id, "date": segment.date},
            )
        keyed.append((parsed is None, parsed or datetime.min, position, segment))
    keyed.sort(key=lambda item: item[:3])
    return tuple(item[3] for item in keyed)
