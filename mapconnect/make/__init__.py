"""
Build connected buildings and parking lots from raw footprints.
"""

from .address import get_address
from .buildings import make_all_buildings
from .driveway import find_driveway
from .parking_lots import estimate_capacity, make_all_parking_lots

__all__ = [
    "estimate_capacity",
    "find_driveway",
    "get_address",
    "make_all_buildings",
    "make_all_parking_lots",
]
