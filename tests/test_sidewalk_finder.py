"""
Tests for the batch nearest-sidewalk lookup.
"""

import pytest

from mapconnect.core.coordinates import BoundingBox
from mapconnect.geo import find_sidewalk_points
from mapconnect.network import Position


def find(network, pts, max_dist=100.0, **kwargs):
    return find_sidewalk_points(
        network.get_bounds(), set(pts), network.all_lanes(), max_dist, **kwargs
    )


class TestFindSidewalkPoints:

    def test_snaps_to_nearest_sidewalk(self, network):
        result = find(network, [(100.0, 30.0)])
        assert result == {(100.0, 30.0): Position(1, 100.0)}

    def test_ignores_driving_lanes(self, network):
        # Closest lane overall is the driving lane at y=5
        result = find(network, [(50.0, 6.0)])
        assert result[(50.0, 6.0)].lane in (1, 3)
        assert result[(50.0, 6.0)].lane != 2

    def test_out_of_range_is_absent(self, network):
        result = find(network, [(100.0, 300.0), (100.0, 30.0)])
        assert (100.0, 300.0) not in result
        assert (100.0, 30.0) in result

    def test_radius_is_respected(self, network):
        assert find(network, [(100.0, 30.0)], max_dist=19.0) == {}
        assert len(find(network, [(100.0, 30.0)], max_dist=21.0)) == 1

    def test_outside_bounds_is_absent(self, network):
        result = find_sidewalk_points(
            BoundingBox(0, 0, 50, 50), {(100.0, 30.0)}, network.all_lanes(), 100.0
        )
        assert result == {}

    def test_no_sidewalks(self, network):
        driving = [l for l in network.all_lanes() if not l.is_sidewalk()]
        assert find_sidewalk_points(network.get_bounds(), {(1.0, 1.0)}, driving, 100.0) == {}

    def test_no_points(self, network):
        assert find(network, []) == {}

    def test_reports_progress(self, network, timer):
        find(network, [(100.0, 30.0), (520.0, 100.0)], timer=timer)
        # The iteration was fully consumed
        with pytest.raises(ValueError):
            timer.next()
