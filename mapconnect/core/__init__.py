"""Core models and configuration."""

from .config import Settings, settings
from .coordinates import BoundingBox
from .models import (
    Building,
    BuildingID,
    FrontPath,
    OffstreetParking,
    OriginalBuilding,
    ParkingLot,
    ParkingLotID,
    RawBuilding,
    RawParkingLot,
)

__all__ = [
    "Settings",
    "settings",
    "BoundingBox",
    "Building",
    "BuildingID",
    "FrontPath",
    "OffstreetParking",
    "OriginalBuilding",
    "ParkingLot",
    "ParkingLotID",
    "RawBuilding",
    "RawParkingLot",
]
