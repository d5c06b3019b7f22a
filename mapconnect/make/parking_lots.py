"""
Turn raw parking lot footprints into lots with a driveway.

A lot is only useful if cars can reach it, so lots without a driveway are
dropped entirely.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from shapely.geometry import LineString, Point

from ..core.config import settings
from ..core.models import ParkingLot, RawParkingLot
from ..geo.sidewalk_finder import find_sidewalk_points
from ..geometry.connector import HashablePt, to_hashable, trim_path
from ..network.base import Network
from ..utils.logging_config import get_logger
from ..utils.timer import Timer
from .buildings import SidewalkFinder
from .driveway import find_driveway

logger = get_logger(__name__)

PHASE = "convert parking lots"


def estimate_capacity(lot: RawParkingLot, spot_area: Optional[float] = None) -> int:
    """Declared capacity, or how many spots of `spot_area` fit in the lot."""
    if lot.capacity is not None:
        return lot.capacity
    if spot_area is None:
        spot_area = settings.parking_spot_area_m2
    # TODO Rethink this; it ignores aisles and the lot's shape
    return int(lot.polygon.area / spot_area)


def make_all_parking_lots(
    raw_lots: Sequence[RawParkingLot],
    network: Network,
    timer: Optional[Timer] = None,
    *,
    search_radius: Optional[float] = None,
    sidewalk_finder: SidewalkFinder = find_sidewalk_points,
) -> List[ParkingLot]:
    """
    Connect every parking lot that can get a driveway.

    Args:
        raw_lots: Lot footprints, in the order ids should be handed out
        network: Road network to connect to
        timer: Progress context receiving per-lot warnings
        search_radius: Max centroid-to-sidewalk distance in meters
            (default: settings.parking_lot_search_radius_m)
        sidewalk_finder: Batch nearest-sidewalk lookup

    Returns:
        Parking lots with ids 0..N-1 in input order
    """
    if timer is None:
        timer = Timer(PHASE)
    if search_radius is None:
        search_radius = settings.parking_lot_search_radius_m
    buffer = settings.driveway_buffer_m

    timer.start(PHASE)
    center_per_lot: List[HashablePt] = []
    query = set()
    for lot in raw_lots:
        center = to_hashable(lot.polygon.centroid)
        center_per_lot.append(center)
        query.add(center)

    sidewalk_pts = sidewalk_finder(
        network.get_bounds(),
        query,
        network.all_lanes(),
        search_radius,
        timer,
    )

    results: List[ParkingLot] = []
    timer.start_iter("create parking lot driveways", len(center_per_lot))
    for lot_center, orig in zip(center_per_lot, raw_lots):
        timer.next()
        sidewalk_pos = sidewalk_pts.get(lot_center)
        if sidewalk_pos is None:
            continue

        sidewalk_pt = sidewalk_pos.pt(network)
        if to_hashable(sidewalk_pt) == lot_center:
            timer.warn(
                f"Skipping parking lot {orig.osm_id} because driveway has 0 length",
                lot_id=orig.osm_id,
            )
            continue
        sidewalk_line = trim_path(orig.polygon, LineString([Point(lot_center), sidewalk_pt]))

        # Can this lot have a driveway? If it's not next to a driving lane, then no.
        driveway = find_driveway(sidewalk_pos, sidewalk_line, network, buffer)
        if driveway is None:
            timer.warn(
                f"Parking lot from OSM way {orig.osm_id} can't have a driveway. "
                f"Forfeiting {orig.capacity} parking spots",
                lot_id=orig.osm_id,
            )
            continue

        driveway_line, driving_pos = driveway
        results.append(ParkingLot(
            id=len(results),
            polygon=orig.polygon,
            capacity=estimate_capacity(orig),
            osm_id=orig.osm_id,
            driveway_line=driveway_line,
            driving_pos=driving_pos,
            sidewalk_line=sidewalk_line,
            sidewalk_pos=sidewalk_pos,
        ))

    timer.note(
        f"Discarded {len(raw_lots) - len(results)} parking lots that weren't "
        f"close enough to a sidewalk"
    )
    timer.stop(PHASE)

    logger.debug("Connected %d of %d parking lots", len(results), len(raw_lots))
    return results
