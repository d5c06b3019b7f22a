"""
Spatial lookups against the road network.
"""

from .sidewalk_finder import find_sidewalk_points

__all__ = [
    "find_sidewalk_points",
]
