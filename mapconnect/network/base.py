"""
What the connection pipeline needs from a road network.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from ..core.coordinates import BoundingBox
from .model import Lane, LaneID, Position, Road


class Network(Protocol):
    """Read-only queries on a road network snapshot."""

    def get_bounds(self) -> BoundingBox:
        ...

    def all_lanes(self) -> Iterable[Lane]:
        ...

    def get_l(self, lane: LaneID) -> Lane:
        ...

    def get_parent(self, lane: LaneID) -> Road:
        ...

    def equiv_pos(self, pos: Position, lane: LaneID, offset: float) -> Position:
        ...
