"""
Batch nearest-sidewalk lookup.

Given many query points, find for each the closest point on any sidewalk
lane within a radius, expressed as a Position on that lane. One spatial
index is built per call, so callers should batch all their points into a
single call.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from shapely.geometry import Point
from shapely.strtree import STRtree

from ..core.coordinates import BoundingBox
from ..geometry.connector import HashablePt
from ..network.model import Lane, Position
from ..utils.logging_config import get_logger
from ..utils.timer import Timer

logger = get_logger(__name__)


def find_sidewalk_points(
    bounds: BoundingBox,
    pts: Iterable[HashablePt],
    lanes: Iterable[Lane],
    max_dist: float,
    timer: Optional[Timer] = None,
) -> Dict[HashablePt, Position]:
    """
    Snap points to their nearest sidewalk.

    Args:
        bounds: Map bounds; points outside are never matched
        pts: Query points
        lanes: All lanes of the network; only sidewalks are considered
        max_dist: Search radius in meters
        timer: Optional progress context

    Returns:
        Mapping from each point that has a sidewalk within `max_dist` to the
        position on that sidewalk closest to it. Unmatched points are absent.
    """
    sidewalks = [lane for lane in lanes if lane.is_sidewalk()]
    pts = list(pts)
    results: Dict[HashablePt, Position] = {}
    if not sidewalks or not pts:
        return results

    tree = STRtree([lane.center_pts for lane in sidewalks])

    if timer:
        timer.start_iter("find closest sidewalk point", len(pts))
    for pt in pts:
        if timer:
            timer.next()
        if not bounds.contains(pt):
            continue
        query = Point(pt)
        hits = tree.query_nearest(query, max_distance=max_dist, all_matches=False)
        if len(hits) == 0:
            continue
        lane = sidewalks[int(hits[0])]
        results[pt] = Position(lane.id, lane.center_pts.project(query))

    logger.debug("Matched %d of %d points to a sidewalk", len(results), len(pts))
    return results
