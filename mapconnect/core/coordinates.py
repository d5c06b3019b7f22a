"""
Planar bounds of a map.

All geometry is in a local metric frame (meters), as produced by the map
importer, so no reprojection happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_geometries(cls, geometries: Iterable) -> "BoundingBox":
        """Smallest box covering every shapely geometry given."""
        bounds = [g.bounds for g in geometries if not g.is_empty]
        if not bounds:
            return cls(0.0, 0.0, 0.0, 0.0)
        return cls(
            min_x=min(b[0] for b in bounds),
            min_y=min(b[1] for b in bounds),
            max_x=max(b[2] for b in bounds),
            max_y=max(b[3] for b in bounds),
        )

    def contains(self, pt: Tuple[float, float]) -> bool:
        x, y = pt
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def expanded(self, margin: float) -> "BoundingBox":
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return as (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
