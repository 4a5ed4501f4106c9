"""Legacy outbound/return travel records to flat segments.

Before segments were stored directly, each direction was one wide
record: a single flight (or ``legs`` when ``isMultiLeg`` is set), one
optional taxi or train transfer described by prefixed fields, arrays of
extra taxis and trains, and ``additionalSegments`` for types the record
could not express. The converters here read such a record and produce
the flat segment list in travel order, with role hints so flights stay
the main transport even when a train transfer comes first. Missing
locations fall back to generic placeholders ("Airport", "Station", ...)
so every hop is still displayable.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..domain.models import FlatSegment, SegmentRole, SegmentType
from ..io.segments import segment_from_dict
from .ids import generate_segment_id

Record = Mapping[str, Any]


def _text(record: Record, key: str, default: str = "") -> str:
    value = record.get(key)
    if value is None or value == "":
        return default
    return str(value)


def _payment_note(status: str) -> str:
    return f"Payment: {status}" if status else ""


def _items(record: Record, key: str) -> list[Record]:
    value = record.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _flight_segments(record: Record, date: str) -> list[FlatSegment]:
    """The flight itself: one segment per leg, or the single flight fields."""
    legs = _items(record, "legs")
    if record.get("isMultiLeg") and legs:
        airline = _text(record, "flightNumber").split(" ")[0]
        return [
            FlatSegment(
                id=generate_segment_id(),
                type=SegmentType.FLIGHT.value,
                role=SegmentRole.MAIN.value,
                from_location=_text(leg, "departureAirport"),
                to_location=_text(leg, "arrivalAirport"),
                date=date,
                departure_time=_text(leg, "departureTime"),
                arrival_time=_text(leg, "arrivalTime"),
                flight_number=_text(leg, "flightNumber") or _text(record, "flightNumber"),
                airline=airline,
                notes=f"Layover: {leg['layoverDuration']}" if leg.get("layoverDuration") else "",
            )
            for leg in legs
        ]

    if not (record.get("flightNumber") or record.get("departureAirport")):
        return []
    return [
        FlatSegment(
            id=generate_segment_id(),
            type=SegmentType.FLIGHT.value,
            role=SegmentRole.MAIN.value,
            from_location=_text(record, "departureAirport"),
            to_location=_text(record, "arrivalAirport"),
            date=date,
            departure_time=_text(record, "departureTime"),
            arrival_time=_text(record, "arrivalTime"),
            flight_number=_text(record, "flightNumber"),
        )
    ]


def _single_transfer(
    record: Record,
    prefix: str,
    date: str,
    taxi_route: tuple[str, str],
    train_route: tuple[str, str],
) -> list[FlatSegment]:
    """The one transfer a legacy record could describe with ``prefix`` fields."""
    kind = record.get(f"{prefix}Type")
    if kind == "taxi" and record.get(f"{prefix}TaxiBooked"):
        return [
            FlatSegment(
                id=generate_segment_id(),
                type=SegmentType.TAXI.value,
                role=SegmentRole.TRANSFER.value,
                from_location=taxi_route[0],
                to_location=taxi_route[1],
                date=date,
                departure_time=_text(record, f"{prefix}CollectionTime"),
                company=_text(record, f"{prefix}Company"),
                contact_details=_text(record, f"{prefix}Contact"),
                notes=_payment_note(_text(record, f"{prefix}PaymentStatus")),
            )
        ]
    if kind == "train":
        return [
            FlatSegment(
                id=generate_segment_id(),
                type=SegmentType.TRAIN.value,
                role=SegmentRole.TRANSFER.value,
                from_location=_text(record, f"{prefix}TrainDepartingStation", train_route[0]),
                to_location=_text(record, f"{prefix}TrainArrivalStation", train_route[1]),
                date=date,
                departure_time=_text(record, f"{prefix}TrainDepartureTime"),
                company=_text(record, f"{prefix}TrainProvider"),
                booking_reference=_text(record, f"{prefix}TrainBookingRef"),
                notes=_payment_note(_text(record, f"{prefix}TrainPaymentStatus")),
            )
        ]
    return []


def _taxi_array(
    record: Record,
    key: str,
    date: str,
    default_from: str,
    default_to: str,
) -> list[FlatSegment]:
    return [
        FlatSegment(
            id=generate_segment_id(),
            type=SegmentType.TAXI.value,
            role=SegmentRole.TRANSFER.value,
            from_location=_text(taxi, "pickupLocation", default_from),
            to_location=_text(taxi, "dropoffLocation", default_to),
            date=date,
            departure_time=_text(taxi, "collectionTime"),
            company=_text(taxi, "company"),
            contact_details=_text(taxi, "contact"),
            booking_reference=_text(taxi, "paymentStatus"),
        )
        for taxi in _items(record, key)
    ]


def _train_array(
    record: Record,
    key: str,
    date: str,
    default_from: str,
    default_to: str,
    destination: Optional[str] = None,
) -> list[FlatSegment]:
    """Extra trains; ``destination`` overrides each train's arrival station."""
    return [
        FlatSegment(
            id=generate_segment_id(),
            type=SegmentType.TRAIN.value,
            role=SegmentRole.TRANSFER.value,
            from_location=_text(train, "departingStation", default_from),
            to_location=destination or _text(train, "arrivalStation", default_to),
            date=date,
            departure_time=_text(train, "departureTime"),
            company=_text(train, "provider"),
            booking_reference=_text(train, "bookingRef"),
            notes=_payment_note(_text(train, "paymentStatus")),
        )
        for train in _items(record, key)
    ]


def _stored_extra_segments(record: Record) -> list[FlatSegment]:
    """Segments the legacy record kept verbatim in ``additionalSegments``."""
    return [segment_from_dict(item) for item in _items(record, "additionalSegments")]


def outbound_to_segments(record: Optional[Record]) -> tuple[FlatSegment, ...]:
    """Flat segments for a legacy outbound record, in travel order."""
    if not record:
        return ()

    date = _text(record, "flightDate")
    departure_airport = _text(record, "departureAirport", "Airport")
    arrival_airport = _text(record, "arrivalAirport", "Airport")

    segments: list[FlatSegment] = []
    segments += _single_transfer(
        record,
        "transferToAirport",
        date,
        taxi_route=("Home/Hotel", departure_airport),
        train_route=("Station", "Airport"),
    )
    segments += _taxi_array(
        record,
        "transferToAirportTaxis",
        date,
        default_from="Pickup",
        default_to=departure_airport,
    )
    segments += _train_array(
        record,
        "transferToAirportTrains",
        date,
        default_from="Station",
        default_to=departure_airport,
        destination=departure_airport,
    )
    segments += _flight_segments(record, date)
    segments += _single_transfer(
        record,
        "transferToAccom",
        date,
        taxi_route=(arrival_airport, "Hotel/Accommodation"),
        train_route=("Station", "Hotel"),
    )
    segments += _taxi_array(
        record,
        "transferToAccomTaxis",
        date,
        default_from=arrival_airport,
        default_to="Hotel",
    )
    segments += _train_array(
        record, "transferToAccomTrains", date, default_from="Station", default_to="Hotel"
    )
    segments += _stored_extra_segments(record)
    return tuple(segments)


def return_to_segments(record: Optional[Record]) -> tuple[FlatSegment, ...]:
    """Flat segments for a legacy return record, in travel order."""
    if not record:
        return ()

    date = _text(record, "flightDate")
    arrival_airport = _text(record, "arrivalAirport", "Airport")

    segments: list[FlatSegment] = []
    segments += _flight_segments(record, date)
    segments += _single_transfer(
        record,
        "transferHome",
        date,
        taxi_route=(arrival_airport, "Home"),
        train_route=("Station", "Home"),
    )
    segments += _taxi_array(
        record,
        "transferHomeTaxis",
        date,
        default_from="Airport",
        default_to="Home",
    )
    segments += _train_array(
        record, "transferHomeTrains", date, default_from="Airport", default_to="Home"
    )
    segments += _stored_extra_segments(record)
    return tuple(segments)
