"""
Input validation for raw footprints.

Usage:
    from mapconnect.utils.validation import validate_ring, ValidationError

    ring = validate_ring([[0, 0], [10, 0], [10, 10]], feature="way 42")
"""

import math
from typing import List, Optional, Sequence, Tuple

from shapely.geometry import Polygon
from shapely.validation import explain_validity


class ValidationError(ValueError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str = "", suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field = field
        self.suggestions = suggestions or []


def validate_ring(
    coords: Sequence[Sequence[float]],
    feature: str = "feature",
) -> List[Tuple[float, float]]:
    """
    Validate a footprint ring and return it as (x, y) tuples.

    The closing point may be given or omitted. Consecutive duplicate points
    are dropped.

    Raises:
        ValidationError: If the ring has non-finite values or fewer than
            three distinct points
    """
    ring: List[Tuple[float, float]] = []
    for coord in coords:
        if len(coord) < 2:
            raise ValidationError(
                f"{feature} has a coordinate with fewer than 2 values: {list(coord)}",
                field="polygon",
            )
        x, y = float(coord[0]), float(coord[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValidationError(f"{feature} has a non-finite coordinate", field="polygon")
        if ring and ring[-1] == (x, y):
            continue
        ring.append((x, y))

    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()

    if len(set(ring)) < 3:
        raise ValidationError(
            f"{feature} has fewer than 3 distinct points",
            field="polygon",
            suggestions=["Check that the way is closed and not collapsed"],
        )
    return ring


def validate_polygon(
    coords: Sequence[Sequence[float]],
    feature: str = "feature",
) -> Polygon:
    """
    Build a valid, non-empty footprint polygon.

    Raises:
        ValidationError: If the ring is malformed or the polygon is invalid
    """
    polygon = Polygon(validate_ring(coords, feature))
    if not polygon.is_valid:
        raise ValidationError(
            f"{feature} is not a valid polygon: {explain_validity(polygon)}",
            field="polygon",
            suggestions=["Self-intersecting outlines must be split before import"],
        )
    if polygon.is_empty or polygon.area <= 0:
        raise ValidationError(f"{feature} has zero area", field="polygon")
    return polygon
