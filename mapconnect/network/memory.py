"""
Dictionary-backed road network.

Used by the CLI when loading a map file and by tests that need a small
synthetic network without a full map import.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from shapely.geometry import LineString

from ..core.config import settings
from ..core.coordinates import BoundingBox
from .model import Lane, LaneID, LaneType, Position, Road, RoadID


class InMemoryNetwork:
    """
    Road network held in plain dicts.

    Usage:
        network = InMemoryNetwork()
        network.add_road(1, "Main St", [
            (10, LaneType.SIDEWALK, [(0, 5), (100, 5)]),
            (11, LaneType.DRIVING, [(0, 0), (100, 0)]),
        ])
    """

    def __init__(self, bounds: Optional[BoundingBox] = None):
        self._lanes: Dict[LaneID, Lane] = {}
        self._roads: Dict[RoadID, Road] = {}
        self._bounds = bounds

    def add_road(
        self,
        road_id: RoadID,
        name: Optional[str],
        lanes: Sequence[Tuple[LaneID, LaneType, Sequence[Tuple[float, float]]]],
    ) -> Road:
        """Add a road and its lanes, given left to right."""
        if road_id in self._roads:
            raise ValueError(f"Road {road_id} already exists")
        children = []
        for lane_id, lane_type, pts in lanes:
            if lane_id in self._lanes:
                raise ValueError(f"Lane {lane_id} already exists")
            lane_type = LaneType(lane_type)
            self._lanes[lane_id] = Lane(
                id=lane_id,
                lane_type=lane_type,
                parent=road_id,
                center_pts=LineString(pts),
            )
            children.append((lane_id, lane_type))
        road = Road(id=road_id, name=name, children=tuple(children))
        self._roads[road_id] = road
        return road

    def get_bounds(self) -> BoundingBox:
        if self._bounds is not None:
            return self._bounds
        # Nothing farther than the widest search radius can reach a lane anyway
        lanes = BoundingBox.from_geometries(l.center_pts for l in self._lanes.values())
        return lanes.expanded(settings.parking_lot_search_radius_m)

    def all_lanes(self) -> List[Lane]:
        return list(self._lanes.values())

    def get_l(self, lane: LaneID) -> Lane:
        return self._lanes[lane]

    def get_parent(self, lane: LaneID) -> Road:
        return self._roads[self._lanes[lane].parent]

    def equiv_pos(self, pos: Position, lane: LaneID, offset: float) -> Position:
        """
        Project `pos` onto another lane of the same road, then shift it by
        `offset` meters, staying within the lane.
        """
        src = self.get_l(pos.lane)
        dst = self.get_l(lane)
        if src.parent != dst.parent:
            raise ValueError(
                f"Lanes {pos.lane} and {lane} are on different roads "
                f"({src.parent} and {dst.parent})"
            )
        dist = dst.center_pts.project(pos.pt(self)) + offset
        return Position(lane, min(max(dist, 0.0), dst.length()))

    def __len__(self) -> int:
        return len(self._lanes)
