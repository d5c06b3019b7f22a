"""
Connector geometry between footprints and the lanes they attach to.
"""

from typing import Tuple

from shapely.geometry import LineString, Point, Polygon

HashablePt = Tuple[float, float]

# Points closer than this in either axis are the same point
PRECISION = 4


def to_hashable(pt: Point) -> HashablePt:
    """Rounded (x, y) used as a dict key and for point equality."""
    return (round(pt.x, PRECISION), round(pt.y, PRECISION))


def trim_path(poly: Polygon, path: LineString) -> LineString:
    """
    Make a connector start on the footprint's border instead of its center.

    `path` runs from a point inside `poly` to a point outside it. The first
    boundary edge crossing the path decides where the trimmed path begins.
    """
    end = Point(path.coords[-1])
    ring = list(poly.exterior.coords)
    for a, b in zip(ring, ring[1:]):
        edge = LineString([a, b])
        hit = edge.intersection(path)
        # Collinear overlaps come back as lines; only a clean crossing counts
        if hit.is_empty or hit.geom_type != "Point":
            continue
        if to_hashable(hit) == to_hashable(end):
            continue
        return LineString([hit, end])
    # Just give up
    return path


def driveway_line(sidewalk_line: LineString, driving_pt: Point) -> LineString:
    """Footprint edge -> sidewalk -> driving lane."""
    start, sidewalk = sidewalk_line.coords[0], sidewalk_line.coords[-1]
    return LineString([start, sidewalk, (driving_pt.x, driving_pt.y)])
