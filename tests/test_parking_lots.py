"""
Tests for parking lot synthesis.
"""

import logging

import pytest
from shapely.geometry import box

from mapconnect.core.models import RawParkingLot
from mapconnect.make.parking_lots import PHASE, estimate_capacity, make_all_parking_lots
from mapconnect.network import Position


@pytest.fixture
def lots(raw_parking_lots, network, timer):
    return make_all_parking_lots(raw_parking_lots, network, timer)


class TestEstimateCapacity:

    def test_declared_capacity_wins(self):
        lot = RawParkingLot(osm_id=1, polygon=box(0, 0, 100, 100), capacity=3)
        assert estimate_capacity(lot) == 3

    def test_declared_zero(self):
        lot = RawParkingLot(osm_id=1, polygon=box(0, 0, 100, 100), capacity=0)
        assert estimate_capacity(lot) == 0

    def test_estimated_from_area(self):
        lot = RawParkingLot(osm_id=1, polygon=box(0, 0, 2, 23), capacity=None)
        assert lot.polygon.area == 46.0
        assert estimate_capacity(lot) == 2

    def test_truncates(self):
        lot = RawParkingLot(osm_id=1, polygon=box(0, 0, 20, 20))
        assert estimate_capacity(lot) == 17

    def test_custom_spot_area(self):
        lot = RawParkingLot(osm_id=1, polygon=box(0, 0, 10, 10))
        assert estimate_capacity(lot, spot_area=10.0) == 10


class TestMakeAllParkingLots:

    def test_connected_lots(self, lots):
        assert [lot.osm_id for lot in lots] == [1, 4]
        assert [lot.id for lot in lots] == [0, 1]

    def test_capacities(self, lots):
        assert [lot.capacity for lot in lots] == [17, 2]

    def test_connectors(self, lots):
        lot = lots[0]
        assert lot.sidewalk_pos == Position(1, 70.0)
        assert list(lot.sidewalk_line.coords) == [(70.0, 20.0), (70.0, 10.0)]
        assert lot.driving_pos == Position(2, 70.0)
        assert list(lot.driveway_line.coords) == [(70.0, 20.0), (70.0, 10.0), (70.0, 5.0)]

    def test_every_lot_has_valid_driveway(self, lots, network):
        for lot in lots:
            assert lot.sidewalk_line.length > 0
            length = network.get_l(lot.driving_pos.lane).length()
            assert 7.0 < lot.driving_pos.dist_along < length - 7.0

    def test_no_driveway_discards_lot(self, lots, timer):
        assert 2 not in [lot.osm_id for lot in lots]
        assert timer.warnings_for(PHASE) == [
            "Parking lot from OSM way 2 can't have a driveway. Forfeiting 50 parking spots",
        ]

    def test_undeclared_capacity_in_warning(self, network, timer):
        lot = RawParkingLot(osm_id=8, polygon=box(1002, 20, 1008, 26))
        assert make_all_parking_lots([lot], network, timer) == []
        assert timer.warnings_for(PHASE) == [
            "Parking lot from OSM way 8 can't have a driveway. Forfeiting None parking spots",
        ]

    def test_warnings_carry_lot_id(self, raw_parking_lots, network, timer, caplog):
        with caplog.at_level(logging.WARNING, logger="mapconnect.utils.timer"):
            make_all_parking_lots(raw_parking_lots, network, timer)
        records = [r for r in caplog.records if r.name == "mapconnect.utils.timer"]
        assert [r.lot_id for r in records] == [2]
        assert records[0].phase == PHASE

    def test_driveway_exactly_on_buffer(self, network, timer):
        lots = [
            RawParkingLot(osm_id=21, polygon=box(5, 20, 9, 24)),
            RawParkingLot(osm_id=22, polygon=box(191, 20, 195, 24)),
        ]
        assert make_all_parking_lots(lots, network, timer) == []
        assert len(timer.warnings_for(PHASE)) == 2

    def test_discard_summary(self, lots, raw_parking_lots, timer):
        assert timer.notes == [
            (PHASE, "Discarded 2 parking lots that weren't close enough to a sidewalk"),
        ]
        assert len(raw_parking_lots) - len(lots) == 2

    def test_zero_length(self, network, timer):
        lot = RawParkingLot(osm_id=11, polygon=box(40, 0, 60, 20))
        assert make_all_parking_lots([lot], network, timer) == []
        assert timer.warnings_for(PHASE) == [
            "Skipping parking lot 11 because driveway has 0 length",
        ]

    def test_larger_radius_than_buildings(self, network, timer):
        lot = RawParkingLot(osm_id=12, polygon=box(140, 150, 160, 170))
        calls = []

        def finder(bounds, pts, lanes, max_dist, timer=None):
            calls.append(max_dist)
            return {}

        make_all_parking_lots([lot], network, timer, sidewalk_finder=finder)
        assert calls == [500.0]

    def test_without_timer(self, raw_parking_lots, network):
        assert len(make_all_parking_lots(raw_parking_lots, network)) == 2
