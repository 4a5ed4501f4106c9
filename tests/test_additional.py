"""Tests for legacy additional-travel records and date ordering."""

from datetime import datetime

import pytest

from travel_journeys.domain.models import AdditionalTravelSegment, SegmentType
from travel_journeys.journey.additional import (
    is_unified_record,
    legacy_to_additional_travel,
    parse_travel_date,
    select_primary_location_field,
    sort_additional_travel,
)


class TestLegacyConversion:
    def test_flight_field_takes_precedence_over_ferry(self):
        record = {
            "travelType": "flight",
            "flightDepartureAirport": "LHR",
            "ferryDepartingFrom": "Dover",
            "trainDepartingFrom": "Euston",
        }
        segment = legacy_to_additional_travel(record)
        assert segment.from_location == "LHR"

    def test_ferry_takes_precedence_over_train(self):
        record = {
            "travelType": "ferry",
            "ferryDepartingFrom": "Dover",
            "trainDepartingFrom": "Euston",
            "ferryDestination": "Calais",
            "ferryDate": "2025-06-01",
        }
        segment = legacy_to_additional_travel(record)
        assert segment.type == SegmentType.FERRY
        assert segment.from_location == "Dover"
        assert segment.to_location == "Calais"
        assert segment.date == "2025-06-01"

    def test_blank_field_falls_through(self):
        record = {"flightDepartureAirport": "  ", "trainDepartingFrom": "Euston"}
        assert legacy_to_additional_travel(record).from_location == "Euston"

    def test_empty_record_still_converts(self):
        segment = legacy_to_additional_travel({})
        assert segment.type == SegmentType.FLIGHT
        assert segment.from_location == ""
        assert segment.to_location == ""
        assert segment.id

    def test_car_maps_to_car_rental(self):
        record = {
            "travelType": "car",
            "carBookingDetails": "HERTZ-991",
            "carContactDetails": "+44 20 0000",
        }
        segment = legacy_to_additional_travel(record)
        assert segment.type == SegmentType.CAR_RENTAL
        assert segment.booking_reference == "HERTZ-991"
        assert segment.contact == "+44 20 0000"

    def test_unknown_type_becomes_other(self):
        assert legacy_to_additional_travel({"travelType": "zeppelin"}).type == SegmentType.OTHER

    def test_notes_and_price(self):
        record = {
            "travelType": "train",
            "trainAdditionalNotes": "Quiet coach",
            "trainPrice": "42.50",
        }
        segment = legacy_to_additional_travel(record)
        assert segment.notes == "Quiet coach"
        assert segment.price == "42.50"

    def test_multi_leg_flight(self):
        record = {
            "travelType": "flight",
            "flightIsMultiLeg": True,
            "flightLegs": [
                {"departureAirport": "LHR", "arrivalAirport": "AMS", "flightNumber": "KL1000"},
                {"departureAirport": "AMS", "arrivalAirport": "JFK"},
            ],
        }
        segment = legacy_to_additional_travel(record)
        assert segment.is_connecting
        assert [leg.leg_number for leg in segment.legs] == [1, 2]
        assert segment.legs[0].flight_number == "KL1000"

    def test_stray_leg_entries_do_not_leave_gaps(self):
        record = {
            "flightIsMultiLeg": True,
            "flightLegs": [{"departureAirport": "A"}, None, {"departureAirport": "B"}],
        }
        segment = legacy_to_additional_travel(record)
        assert [leg.leg_number for leg in segment.legs] == [1, 2]
        assert [leg.departure_airport for leg in segment.legs] == ["A", "B"]

    def test_one_usable_leg_is_not_connecting(self):
        record = {"flightIsMultiLeg": True, "flightLegs": [{"departureAirport": "A"}, "junk"]}
        assert legacy_to_additional_travel(record).legs is None

    def test_unhashable_type_becomes_other(self):
        assert legacy_to_additional_travel({"travelType": ["car"]}).type == SegmentType.OTHER

    def test_multi_leg_flag_with_one_leg_is_not_connecting(self):
        record = {"flightIsMultiLeg": True, "flightLegs": [{"departureAirport": "LHR"}]}
        segment = legacy_to_additional_travel(record)
        assert not segment.is_connecting
        assert segment.legs is None


def test_select_primary_location_field():
    record = {"a": "", "b": None, "c": "value", "d": "other"}
    assert select_primary_location_field(record, ("a", "b", "c", "d")) == "value"
    assert select_primary_location_field(record, ("a", "b")) == ""


def test_is_unified_record():
    assert is_unified_record({"type": "flight", "fromLocation": ""})
    assert not is_unified_record({"travelType": "flight", "flightDepartureAirport": "LHR"})


class TestDates:
    def test_iso_date(self):
        assert parse_travel_date("2025-03-14") == datetime(2025, 3, 14)

    def test_day_first_by_default(self):
        assert parse_travel_date("04/03/2025") == datetime(2025, 3, 4)

    def test_month_first_order(self):
        assert parse_travel_date("04/03/2025", "MDY") == datetime(2025, 4, 3)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_date(self, value):
        assert parse_travel_date(value) is None

    def test_sort_puts_undated_last_and_is_stable(self):
        segments = [
            AdditionalTravelSegment(id="undated"),
            AdditionalTravelSegment(id="late", date="2025-08-01"),
            AdditionalTravelSegment(id="early", date="2025-02-01"),
            AdditionalTravelSegment(id="early-too", date="2025-02-01"),
            AdditionalTravelSegment(id="garbage", date="???"),
        ]
        ordered = sort_additional_travel(segments)
        assert [s.id for s in ordered] == ["early", "early-too", "late", "undated", "garbage"]
