"""
Vehicle access from a sidewalk position to the nearest driving lane.
"""

from typing import Optional, Tuple

from shapely.geometry import LineString

from ..geometry.connector import PRECISION, driveway_line
from ..network.base import Network
from ..network.model import LaneType, Position


def find_driveway(
    sidewalk_pos: Position,
    sidewalk_line: LineString,
    network: Network,
    buffer: float,
) -> Optional[Tuple[LineString, Position]]:
    """
    Extend a front path across to a driving lane of the same road.

    Returns the three-point driveway line and the position on the driving
    lane, or None if the road has no driving lane or the position falls
    within `buffer` meters of either end of that lane.
    """
    sidewalk_lane = sidewalk_pos.lane
    driving_lane = network.get_parent(sidewalk_lane).find_closest_lane(
        sidewalk_lane, [LaneType.DRIVING]
    )
    if driving_lane is None:
        return None

    driving_pos = sidewalk_pos.equiv_pos(driving_lane, 0.0, network)
    # Compared at point precision, same as point identity
    from_start = round(driving_pos.dist_along, PRECISION)
    from_end = round(network.get_l(driving_lane).length() - driving_pos.dist_along, PRECISION)
    if from_start <= buffer or from_end <= buffer:
        return None

    return driveway_line(sidewalk_line, driving_pos.pt(network)), driving_pos
