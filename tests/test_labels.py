"""Tests for display labels and identifier generation."""

import re

import pytest

from travel_journeys.domain.errors import UnknownTransportTypeError
from travel_journeys.domain.models import (
    MainTransportType,
    SegmentType,
    TransferDirection,
    TransferType,
)
from travel_journeys.journey.ids import generate_id, generate_segment_id
from travel_journeys.journey.labels import (
    get_transfer_label,
    get_transfer_section_label,
    get_transport_hub_name,
    get_transport_icon,
    get_transport_label,
)


class TestHubNames:
    @pytest.mark.parametrize(
        "transport_type, hub",
        [
            (MainTransportType.FLIGHT, "Airport"),
            (MainTransportType.TRAIN, "Station"),
            (MainTransportType.BUS, "Station"),
            (MainTransportType.FERRY, "Port"),
            (MainTransportType.OTHER, "Departure Point"),
            ("taxi", "Departure Point"),
        ],
    )
    def test_hub_name(self, transport_type, hub):
        assert get_transport_hub_name(transport_type) == hub

    def test_section_label_uses_hub(self):
        assert get_transfer_section_label("flight", TransferDirection.TO) == "Transfers to Airport"
        assert get_transfer_section_label("ferry", "from") == "Transfers from Port"

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownTransportTypeError) as exc_info:
            get_transport_hub_name("hovercraft")
        assert exc_info.value.value == "hovercraft"


class TestLabels:
    def test_every_segment_type_has_label_and_icon(self):
        for segment_type in SegmentType:
            assert get_transport_label(segment_type)
            assert get_transport_icon(segment_type)

    def test_every_transfer_type_has_label(self):
        for transfer_type in TransferType:
            assert get_transfer_label(transfer_type)

    def test_specific_labels(self):
        assert get_transport_label("car_rental") == "Car Rental"
        assert get_transport_label(MainTransportType.FLIGHT) == "Flight"
        assert get_transfer_label("private_car") == "Private Car"
        assert get_transport_icon("ferry") == "ship"

    def test_unknown_transfer_type_raises(self):
        with pytest.raises(UnknownTransportTypeError):
            get_transfer_label("rickshaw")


class TestIds:
    def test_generate_id_shape(self):
        assert re.fullmatch(r"\d+-[0-9a-z]{7}", generate_id())

    def test_generate_segment_id_shape(self):
        assert re.fullmatch(r"segment-\d+-[0-9a-z]{5}", generate_segment_id())

    def test_ids_are_distinct(self):
        assert len({generate_id() for _ in range(200)}) == 200
