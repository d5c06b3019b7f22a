"""
Footprints as they come out of the map source, and the connected entities
built from them.

Raw footprints are read-only inputs. Buildings and parking lots are built
once per batch and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from shapely.geometry import LineString, Point, Polygon

from ..network.model import Position

BuildingID = int
ParkingLotID = int

# (name, amenity type), e.g. ("Corner Cafe", "cafe")
Amenity = Tuple[str, str]


# =============================================================================
# RAW INPUT
# =============================================================================


@dataclass(frozen=True, order=True)
class OriginalBuilding:
    """Stable identity of a building in the source data."""
    osm_way_id: int

    def __str__(self) -> str:
        return f"OSM way {self.osm_way_id}"


@dataclass(frozen=True)
class RawBuilding:
    polygon: Polygon
    osm_tags: Dict[str, str] = field(default_factory=dict)
    public_garage_name: Optional[str] = None
    num_parking_spots: int = 0
    amenities: Tuple[Amenity, ...] = ()


@dataclass(frozen=True)
class RawParkingLot:
    osm_id: int
    polygon: Polygon
    capacity: Optional[int] = None


# =============================================================================
# CONNECTED ENTITIES
# =============================================================================


@dataclass(frozen=True)
class FrontPath:
    """Walking connection from a footprint's edge to its sidewalk."""
    sidewalk: Position
    line: LineString


@dataclass(frozen=True)
class OffstreetParking:
    """Vehicle access for a building with its own parking."""
    public_garage_name: Optional[str]
    num_spots: int
    # Footprint edge -> sidewalk -> driving lane
    driveway_line: LineString
    driving_pos: Position


@dataclass(frozen=True)
class Building:
    id: BuildingID
    polygon: Polygon
    address: str
    name: Optional[str]
    osm_way_id: int
    front_path: FrontPath
    amenities: Tuple[Amenity, ...]
    parking: Optional[OffstreetParking]
    label_center: Point

    def to_dict(self) -> dict:
        parking = None
        if self.parking is not None:
            parking = {
                "public_garage_name": self.parking.public_garage_name,
                "num_spots": self.parking.num_spots,
                "driveway_line": _coords(self.parking.driveway_line),
                "driving_pos": self.parking.driving_pos.to_dict(),
            }
        return {
            "id": self.id,
            "osm_way_id": self.osm_way_id,
            "address": self.address,
            "name": self.name,
            "polygon": _coords(self.polygon.exterior),
            "label_center": [self.label_center.x, self.label_center.y],
            "amenities": [list(a) for a in self.amenities],
            "front_path": {
                "sidewalk": self.front_path.sidewalk.to_dict(),
                "line": _coords(self.front_path.line),
            },
            "parking": parking,
        }


@dataclass(frozen=True)
class ParkingLot:
    id: ParkingLotID
    polygon: Polygon
    capacity: int
    osm_id: int

    driveway_line: LineString
    driving_pos: Position
    sidewalk_line: LineString
    sidewalk_pos: Position

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "osm_id": self.osm_id,
            "capacity": self.capacity,
            "polygon": _coords(self.polygon.exterior),
            "driveway_line": _coords(self.driveway_line),
            "driving_pos": self.driving_pos.to_dict(),
            "sidewalk_line": _coords(self.sidewalk_line),
            "sidewalk_pos": self.sidewalk_pos.to_dict(),
        }


def _coords(geom) -> List[List[float]]:
    return [[round(x, 4), round(y, 4)] for x, y in geom.coords]
