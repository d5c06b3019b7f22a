"""
Road network primitives: lanes, roads and positions along lanes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from shapely.geometry import LineString, Point

if TYPE_CHECKING:
    from .base import Network

LaneID = int
RoadID = int


class LaneType(str, Enum):
    DRIVING = "driving"
    PARKING = "parking"
    SIDEWALK = "sidewalk"
    BIKING = "biking"
    BUS = "bus"


@dataclass(frozen=True)
class Lane:
    """One lane of a road, with its centre line in map meters."""
    id: LaneID
    lane_type: LaneType
    parent: RoadID
    center_pts: LineString

    def length(self) -> float:
        return self.center_pts.length

    def dist_along(self, dist: float) -> Point:
        """Point `dist` meters from the start of the lane, clamped to its ends."""
        return self.center_pts.interpolate(dist)

    def is_sidewalk(self) -> bool:
        return self.lane_type == LaneType.SIDEWALK


@dataclass(frozen=True)
class Road:
    """A road segment and its lanes, ordered left to right."""
    id: RoadID
    name: Optional[str] = None
    children: Tuple[Tuple[LaneID, LaneType], ...] = field(default_factory=tuple)

    def get_name(self) -> str:
        return self.name or "unnamed road"

    def lanes(self) -> List[LaneID]:
        return [lane for lane, _ in self.children]

    def find_closest_lane(
        self,
        lane: LaneID,
        lane_types: Iterable[LaneType],
    ) -> Optional[LaneID]:
        """
        Nearest lane on this road (by lane order) whose type is allowed.

        Returns None when the road has no lane of an allowed type besides
        `lane` itself.
        """
        allowed = set(lane_types)
        try:
            idx = self.lanes().index(lane)
        except ValueError:
            raise ValueError(f"Lane {lane} doesn't belong to road {self.id}") from None

        best: Optional[Tuple[int, LaneID]] = None
        for i, (other, lane_type) in enumerate(self.children):
            if other == lane or lane_type not in allowed:
                continue
            dist = abs(i - idx)
            if best is None or dist < best[0]:
                best = (dist, other)
        return best[1] if best else None


@dataclass(frozen=True)
class Position:
    """A point expressed as a distance along a lane."""
    lane: LaneID
    dist_along: float

    def pt(self, network: "Network") -> Point:
        return network.get_l(self.lane).dist_along(self.dist_along)

    def equiv_pos(self, lane: LaneID, offset: float, network: "Network") -> "Position":
        """The matching position on another lane of the same road."""
        return network.equiv_pos(self, lane, offset)

    def to_dict(self) -> dict:
        return {"lane": self.lane, "dist_along": round(self.dist_along, 4)}
