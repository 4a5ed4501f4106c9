"""Tests for leg and transfer edits."""

import pytest

from travel_journeys.domain.models import (
    JourneyTravel,
    MainTransportType,
    SegmentType,
    TransferDirection,
    TransferType,
)
from travel_journeys.journey import editing
from travel_journeys.journey.factories import (
    create_empty_additional_travel,
    create_empty_journey,
    create_empty_main_transport,
    create_empty_transfer,
)


def _assert_legs_numbered(transport):
    assert [leg.leg_number for leg in transport.legs] == list(range(1, len(transport.legs) + 1))
    assert transport.is_connecting == (len(transport.legs) > 1)


def _assert_orders_dense(transfers):
    assert sorted(t.order for t in transfers) == list(range(len(transfers)))


class TestLegs:
    def test_add_and_remove_keep_numbering(self):
        transport = create_empty_main_transport()
        for _ in range(3):
            transport = editing.add_leg(transport)
            _assert_legs_numbered(transport)
        assert len(transport.legs) == 4

        transport = editing.remove_leg(transport, transport.legs[1].id)
        _assert_legs_numbered(transport)
        transport = editing.remove_leg(transport, transport.legs[0].id)
        _assert_legs_numbered(transport)
        assert len(transport.legs) == 2

    def test_last_leg_cannot_be_removed(self):
        transport = create_empty_main_transport()
        assert editing.remove_leg(transport, transport.legs[0].id) is transport

    def test_unknown_leg_id_is_ignored(self):
        transport = editing.add_leg(create_empty_main_transport())
        assert editing.remove_leg(transport, "missing") is transport

    def test_set_connecting(self):
        transport = editing.set_connecting(create_empty_main_transport(), True)
        assert len(transport.legs) == 2
        _assert_legs_numbered(transport)
        assert editing.set_connecting(transport, True) is transport

        single = editing.set_connecting(transport, False)
        assert len(single.legs) == 1
        assert single.legs[0].id == transport.legs[0].id
        _assert_legs_numbered(single)

    def test_change_type_resets_legs(self):
        transport = editing.add_leg(create_empty_main_transport())
        transport = editing.update_leg(transport, transport.legs[0].id, departure_airport="LHR")
        changed = editing.change_transport_type(transport, MainTransportType.TRAIN)
        assert changed.type == MainTransportType.TRAIN
        assert len(changed.legs) == 1
        assert changed.legs[0].departure_airport is None
        assert not changed.is_connecting

    def test_update_leg(self):
        transport = create_empty_main_transport()
        leg_id = transport.legs[0].id
        updated = editing.update_leg(transport, leg_id, departure_time="10:00")
        assert updated.legs[0].departure_time == "10:00"
        assert transport.legs[0].departure_time == ""

    def test_update_leg_rejects_derived_fields(self):
        transport = create_empty_main_transport()
        with pytest.raises(ValueError):
            editing.update_leg(transport, transport.legs[0].id, leg_number=5)

    def test_move_leg(self):
        transport = editing.add_leg(editing.add_leg(create_empty_main_transport()))
        ids = [leg.id for leg in transport.legs]
        moved = editing.move_leg(transport, 2, 0)
        assert [leg.id for leg in moved.legs] == [ids[2], ids[0], ids[1]]
        _assert_legs_numbered(moved)
        assert editing.move_leg(transport, 0, 5) is transport


class TestTransfers:
    @pytest.fixture
    def transfers(self):
        result = ()
        for _ in range(4):
            result = editing.add_transfer(result)
        return result

    def test_add_appends_with_next_order(self, transfers):
        _assert_orders_dense(transfers)
        assert [t.order for t in transfers] == [0, 1, 2, 3]
        assert editing.add_transfer(transfers, TransferType.TRAIN)[-1].type == TransferType.TRAIN

    def test_remove_renumbers(self, transfers):
        remaining = editing.remove_transfer(transfers, transfers[1].id)
        assert len(remaining) == 3
        _assert_orders_dense(remaining)
        assert transfers[1].id not in {t.id for t in remaining}

    def test_reorder(self, transfers):
        ids = [t.id for t in transfers]
        reordered = editing.reorder_transfers(transfers, 0, 3)
        assert [t.id for t in reordered] == ids[1:] + ids[:1]
        assert [t.order for t in reordered] == [0, 1, 2, 3]

    def test_reorder_out_of_range_keeps_order(self, transfers):
        assert editing.reorder_transfers(transfers, 0, 9) == transfers

    def test_move_up_and_down(self, transfers):
        ids = [t.id for t in transfers]
        down = editing.move_transfer(transfers, ids[0], 1)
        assert [t.id for t in down][:2] == [ids[1], ids[0]]
        up = editing.move_transfer(transfers, ids[0], -1)
        assert [t.id for t in up] == ids
        _assert_orders_dense(down)

    def test_sequence_of_edits_keeps_orders_dense(self, transfers):
        result = editing.remove_transfer(transfers, transfers[0].id)
        result = editing.add_transfer(result)
        result = editing.reorder_transfers(result, 3, 1)
        result = editing.remove_transfer(result, result[2].id)
        _assert_orders_dense(result)

    def test_remove_repairs_gaps_from_stored_orders(self):
        transfers = (
            create_empty_transfer(order=5),
            create_empty_transfer(order=2),
            create_empty_transfer(order=9),
        )
        result = editing.remove_transfer(transfers, "missing")
        assert [t.order for t in result] == [0, 1, 2]
        assert result[0].id == transfers[1].id

    def test_update_transfer(self, transfers):
        updated = editing.update_transfer(transfers, transfers[2].id, type="train", company="GWR")
        assert updated[2].type == TransferType.TRAIN
        assert updated[2].company == "GWR"
        with pytest.raises(ValueError):
            editing.update_transfer(transfers, transfers[2].id, order=0)

    def test_update_journey_transfers(self, transfers):
        journey = create_empty_journey()
        journey = editing.update_journey_transfers(journey, TransferDirection.FROM, transfers)
        assert journey.transfers_from == transfers
        assert journey.transfers_to == ()

    def test_update_journey_main_transport(self):
        transport = create_empty_main_transport(MainTransportType.FERRY)
        journey = editing.update_journey_main_transport(JourneyTravel(), transport)
        assert journey.main_transport is transport


class TestAdditionalTravelEdits:
    def test_connecting_toggle(self):
        segment = create_empty_additional_travel()
        connecting = editing.set_additional_connecting(segment, True)
        assert connecting.is_connecting
        assert [leg.leg_number for leg in connecting.legs] == [1, 2]

        plain = editing.set_additional_connecting(connecting, False)
        assert not plain.is_connecting
        assert plain.legs is None

    def test_connecting_entry_keeps_two_legs(self):
        segment = editing.set_additional_connecting(create_empty_additional_travel(), True)
        assert editing.remove_additional_leg(segment, segment.legs[0].id) is segment

        grown = editing.add_additional_leg(segment)
        assert len(grown.legs) == 3
        shrunk = editing.remove_additional_leg(grown, grown.legs[0].id)
        assert [leg.leg_number for leg in shrunk.legs] == [1, 2]

    def test_add_leg_requires_connecting(self):
        segment = create_empty_additional_travel()
        assert editing.add_additional_leg(segment) is segment

    def test_change_type_clears_legs(self):
        segment = editing.set_additional_connecting(create_empty_additional_travel(), True)
        changed = editing.change_additional_type(segment, SegmentType.FERRY)
        assert changed.type == SegmentType.FERRY
        assert changed.legs is None
        assert not changed.is_connecting
