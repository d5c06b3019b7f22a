"""
Road network model consumed by the connection pipeline.
"""

from .base import Network
from .memory import InMemoryNetwork
from .model import Lane, LaneID, LaneType, Position, Road, RoadID

__all__ = [
    "InMemoryNetwork",
    "Lane",
    "LaneID",
    "LaneType",
    "Network",
    "Position",
    "Road",
    "RoadID",
]
