"""
Turn raw building footprints into buildings connected to the sidewalk
network.

Buildings that can't reach a sidewalk are dropped. Buildings that reach a
sidewalk but not a driving lane are kept without off-street parking.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional

from shapely.geometry import LineString, Point
from shapely.ops import polylabel

from ..core.config import settings
from ..core.models import Building, FrontPath, OffstreetParking, OriginalBuilding, RawBuilding
from ..geo.sidewalk_finder import find_sidewalk_points
from ..geometry.connector import HashablePt, to_hashable, trim_path
from ..network.base import Network
from ..network.model import Position
from ..utils.logging_config import get_logger
from ..utils.timer import Timer
from .address import NAME, get_address
from .driveway import find_driveway

logger = get_logger(__name__)

PHASE = "convert buildings"

SidewalkFinder = Callable[..., Dict[HashablePt, Position]]


def make_all_buildings(
    raw_buildings: Mapping[OriginalBuilding, RawBuilding],
    network: Network,
    timer: Optional[Timer] = None,
    *,
    search_radius: Optional[float] = None,
    sidewalk_finder: SidewalkFinder = find_sidewalk_points,
) -> List[Building]:
    """
    Connect every building that can be connected.

    Args:
        raw_buildings: Footprints keyed by source identity, in the order ids
            should be handed out
        network: Road network to connect to
        timer: Progress context receiving per-building warnings. Without
            one, warnings only reach the log.
        search_radius: Max centroid-to-sidewalk distance in meters
            (default: settings.building_search_radius_m)
        sidewalk_finder: Batch nearest-sidewalk lookup

    Returns:
        Buildings with ids 0..N-1 in input order
    """
    if timer is None:
        timer = Timer(PHASE)
    if search_radius is None:
        search_radius = settings.building_search_radius_m
    buffer = settings.driveway_buffer_m

    timer.start(PHASE)
    center_per_bldg: Dict[OriginalBuilding, HashablePt] = {}
    query = set()
    timer.start_iter("get building center points", len(raw_buildings))
    for orig_id, b in raw_buildings.items():
        timer.next()
        center = to_hashable(b.polygon.centroid)
        center_per_bldg[orig_id] = center
        query.add(center)

    # Skip buildings that're too far away from their sidewalk
    sidewalk_pts = sidewalk_finder(
        network.get_bounds(),
        query,
        network.all_lanes(),
        search_radius,
        timer,
    )

    results: List[Building] = []
    timer.start_iter("create building front paths", len(center_per_bldg))
    for orig_id, bldg_center in center_per_bldg.items():
        timer.next()
        sidewalk_pos = sidewalk_pts.get(bldg_center)
        if sidewalk_pos is None:
            continue

        sidewalk_pt = sidewalk_pos.pt(network)
        if to_hashable(sidewalk_pt) == bldg_center:
            timer.warn(
                f"Skipping building {orig_id} because front path has 0 length",
                osm_way_id=orig_id.osm_way_id,
            )
            continue

        b = raw_buildings[orig_id]
        sidewalk_line = trim_path(b.polygon, LineString([Point(bldg_center), sidewalk_pt]))

        bldg_id = len(results)
        parking = None
        # Can this building have a driveway? If it's not next to a driving lane, then no.
        driveway = find_driveway(sidewalk_pos, sidewalk_line, network, buffer)
        if driveway is not None:
            line, driving_pos = driveway
            parking = OffstreetParking(
                public_garage_name=b.public_garage_name,
                num_spots=b.num_parking_spots,
                driveway_line=line,
                driving_pos=driving_pos,
            )
        else:
            timer.warn(
                f"Building #{bldg_id} ({orig_id}) can't have a driveway. "
                f"Forfeiting {b.num_parking_spots} parking spots",
                building_id=bldg_id,
                osm_way_id=orig_id.osm_way_id,
            )

        results.append(Building(
            id=bldg_id,
            polygon=b.polygon,
            address=get_address(b.osm_tags, sidewalk_pos.lane, network),
            name=b.osm_tags.get(NAME),
            osm_way_id=orig_id.osm_way_id,
            front_path=FrontPath(sidewalk=sidewalk_pos, line=sidewalk_line),
            amenities=tuple(b.amenities),
            parking=parking,
            label_center=polylabel(b.polygon, tolerance=0.1),
        ))

    timer.note(
        f"Discarded {len(raw_buildings) - len(results)} buildings that weren't "
        f"close enough to a sidewalk"
    )
    timer.stop(PHASE)

    logger.debug("Connected %d of %d buildings", len(results), len(raw_buildings))
    return results
