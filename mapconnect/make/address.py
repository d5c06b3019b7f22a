"""
Street addresses for buildings.
"""

from typing import Mapping

from ..network.base import Network
from ..network.model import LaneID

HOUSE_NUMBER = "addr:housenumber"
STREET = "addr:street"
NAME = "name"

UNKNOWN_NUMBER = "???"


def get_address(tags: Mapping[str, str], sidewalk: LaneID, network: Network) -> str:
    """
    Address from the building's tags, falling back to the street its
    sidewalk belongs to. Never fails; missing parts become "???".
    """
    num = tags.get(HOUSE_NUMBER)
    street = tags.get(STREET)
    if num is not None and street is not None:
        return f"{num} {street}"
    if street is not None:
        return f"{UNKNOWN_NUMBER} {street}"
    return f"{UNKNOWN_NUMBER} {network.get_parent(sidewalk).get_name()}"
