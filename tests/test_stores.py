"""Tests for the travel store adapters."""

import json

import pytest

from travel_journeys.adapters.store import InMemoryTravelStore, JsonFileTravelStore
from travel_journeys.config import StoreConfig
from travel_journeys.domain.errors import ItineraryNotFoundError, StoreError
from travel_journeys.domain.models import (
    AdditionalTravelSegment,
    FlatSegment,
    ItineraryTravel,
    SegmentType,
)


@pytest.fixture
def travel():
    return ItineraryTravel(
        outbound=(
            FlatSegment(id="t1", type="taxi", from_location="Home", to_location="LHR"),
            FlatSegment(id="f1", type="flight", from_location="LHR", to_location="CDG"),
        ),
        additional=(AdditionalTravelSegment(id="a1", type=SegmentType.TRAIN),),
    )


class TestInMemoryTravelStore:
    def test_save_and_load(self, travel):
        store = InMemoryTravelStore()
        store.save("trip", travel)
        assert store.exists("trip")
        assert store.load("trip") == travel

    def test_missing_itinerary(self):
        store = InMemoryTravelStore()
        assert not store.exists("trip")
        with pytest.raises(ItineraryNotFoundError) as exc_info:
            store.load("trip")
        assert exc_info.value.itinerary_id == "trip"

    def test_delete_and_clear(self, travel):
        store = InMemoryTravelStore()
        store.save("a", travel)
        store.save("b", travel)
        assert store.delete("a")
        assert not store.delete("a")
        assert store.clear() == 1
        assert store.stats()["size"] == 0

    def test_stats(self, travel):
        store = InMemoryTravelStore()
        store.save("a", travel)
        store.load("a")
        store.load("a")
        assert store.stats() == {"size": 1, "loads": 2, "saves": 1}


class TestJsonFileTravelStore:
    @pytest.fixture
    def store(self, tmp_path):
        return JsonFileTravelStore(StoreConfig(data_dir=tmp_path / "itineraries"))

    def test_save_writes_boundary_document(self, store, travel):
        store.save("trip", travel)
        path = store.config.path_for("trip")
        assert path.name == "trip.travel.json"
        document = json.loads(path.read_text(encoding="utf-8"))
        assert [s["id"] for s in document["outboundJourney"]] == ["t1", "f1"]
        assert document["returnJourney"] == []
        assert document["additionalTravel"][0]["type"] == "train"

    def test_roundtrip(self, store, travel):
        store.save("trip", travel)
        assert store.exists("trip")
        assert store.load("trip") == travel

    def test_missing_file(self, store):
        assert not store.exists("nope")
        with pytest.raises(ItineraryNotFoundError):
            store.load("nope")

    def test_invalid_json_raises_store_error(self, store):
        path = store.config.path_for("broken")
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError) as exc_info:
            store.load("broken")
        assert exc_info.value.cause is not None
        assert exc_info.value.file_path == str(path)

    def test_wrong_shape_raises_store_error(self, store):
        path = store.config.path_for("list")
        path.parent.mkdir(parents=True)
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(StoreError):
            store.load("list")

    def test_legacy_additional_records_are_normalized(self, store):
        path = store.config.path_for("old")
        path.parent.mkdir(parents=True)
        path.write_text(
            json.dumps(
                {
                    "outboundJourney": [],
                    "additionalTravel": [
                        {"travelType": "train", "trainDepartingFrom": "Euston"}
                    ],
                }
            ),
            encoding="utf-8",
        )
        (segment,) = store.load("old").additional
        assert segment.type == SegmentType.TRAIN
        assert segment.from_location == "Euston"

    def test_legacy_direction_records_are_converted(self, store):
        path = store.config.path_for("legacy")
        path.parent.mkdir(parents=True)
        path.write_text(
            json.dumps(
                {
                    "outboundJourney": [],
                    "outboundTravel": {
                        "flightDate": "2025-03-14",
                        "flightNumber": "BA1234",
                        "departureAirport": "LHR",
                        "arrivalAirport": "CDG",
                        "transferToAirportType": "taxi",
                        "transferToAirportTaxiBooked": True,
                    },
                    "returnTravel": {
                        "flightNumber": "BA305",
                        "departureAirport": "CDG",
                        "arrivalAirport": "LHR",
                    },
                }
            ),
            encoding="utf-8",
        )
        travel = store.load("legacy")
        assert [s.type for s in travel.outbound] == ["taxi", "flight"]
        assert travel.outbound[1].from_location == "LHR"
        assert [s.from_location for s in travel.return_] == ["CDG"]

    def test_unhashable_legacy_type_becomes_other(self, store):
        path = store.config.path_for("odd")
        path.parent.mkdir(parents=True)
        path.write_text(
            json.dumps({"additionalTravel": [{"travelType": {"kind": "boat"}}]}),
            encoding="utf-8",
        )
        (segment,) = store.load("odd").additional
        assert segment.type == SegmentType.OTHER
