"""
Map file loader.

Parses a JSON map file (road network plus raw footprints) into an
InMemoryNetwork and raw footprint records.

Format:
    {
      "bounds": [min_x, min_y, max_x, max_y],          (optional)
      "roads": [{"id": 1, "name": "Main St", "lanes": [
          {"id": 10, "type": "sidewalk", "points": [[0, 5], [100, 5]]}, ...]}],
      "buildings": [{"osm_way_id": 7, "polygon": [[x, y], ...],
                     "tags": {"addr:street": "Main St"}, "num_parking_spots": 2}],
      "parking_lots": [{"osm_id": 9, "polygon": [[x, y], ...], "capacity": null}]
    }

Malformed footprints are skipped with a warning; a malformed network is an
error, since nothing can be connected without it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from ..core.coordinates import BoundingBox
from ..core.models import OriginalBuilding, RawBuilding, RawParkingLot
from ..network.memory import InMemoryNetwork
from ..network.model import LaneType
from ..utils.validation import ValidationError, validate_polygon
from ..utils.warn import Warn


class MapLoadError(Exception):
    """Raised when a map file can't be turned into a usable network."""


# =============================================================================
# FILE SCHEMA
# =============================================================================


class LaneSpec(BaseModel):
    id: int
    type: LaneType
    points: List[Tuple[float, float]] = Field(min_length=2)


class RoadSpec(BaseModel):
    id: int
    name: Optional[str] = None
    lanes: List[LaneSpec] = Field(default_factory=list)


class BuildingSpec(BaseModel):
    osm_way_id: int
    polygon: List[List[float]]
    tags: Dict[str, str] = Field(default_factory=dict)
    public_garage_name: Optional[str] = None
    num_parking_spots: int = Field(default=0, ge=0)
    amenities: List[Tuple[str, str]] = Field(default_factory=list)


class ParkingLotSpec(BaseModel):
    osm_id: int
    polygon: List[List[float]]
    capacity: Optional[int] = Field(default=None, ge=0)


class MapFile(BaseModel):
    bounds: Optional[Tuple[float, float, float, float]] = None
    roads: List[RoadSpec] = Field(default_factory=list)
    buildings: List[BuildingSpec] = Field(default_factory=list)
    parking_lots: List[ParkingLotSpec] = Field(default_factory=list)


# =============================================================================
# LOADER
# =============================================================================


@dataclass
class LoadedMap:
    network: InMemoryNetwork
    buildings: Dict[OriginalBuilding, RawBuilding] = field(default_factory=dict)
    parking_lots: List[RawParkingLot] = field(default_factory=list)


class MapLoader:
    """
    Loader for JSON map files.

    Usage:
        loaded = MapLoader().load("map.json").with_context(timer, "load map")
    """

    def load_json(self, file_path: str | Path) -> dict[str, Any]:
        """Load raw JSON from file."""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Map file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise MapLoadError(f"{path} is not valid JSON: {e}") from e

    def load(self, file_path: str | Path) -> Warn[LoadedMap]:
        return self.parse_from_dict(self.load_json(file_path))

    def parse_from_dict(self, data: dict[str, Any]) -> Warn[LoadedMap]:
        """
        Build the network and footprints.

        Returns:
            The loaded map, with one warning per skipped footprint

        Raises:
            MapLoadError: If the schema doesn't match or lane/road ids clash
        """
        try:
            spec = MapFile.model_validate(data)
        except PydanticValidationError as e:
            raise MapLoadError(f"Invalid map file: {e}") from e

        network = self._build_network(spec)
        warnings: List[str] = []
        loaded = LoadedMap(network=network)

        for b in spec.buildings:
            orig = OriginalBuilding(b.osm_way_id)
            if orig in loaded.buildings:
                warnings.append(f"Skipping duplicate building {orig}")
                continue
            try:
                polygon = validate_polygon(b.polygon, feature=f"building {orig}")
            except ValidationError as e:
                warnings.append(f"Skipping {e}")
                continue
            loaded.buildings[orig] = RawBuilding(
                polygon=polygon,
                osm_tags=dict(b.tags),
                public_garage_name=b.public_garage_name,
                num_parking_spots=b.num_parking_spots,
                amenities=tuple(b.amenities),
            )

        for lot in spec.parking_lots:
            try:
                polygon = validate_polygon(lot.polygon, feature=f"parking lot {lot.osm_id}")
            except ValidationError as e:
                warnings.append(f"Skipping {e}")
                continue
            loaded.parking_lots.append(
                RawParkingLot(osm_id=lot.osm_id, polygon=polygon, capacity=lot.capacity)
            )

        return Warn.with_warnings(loaded, warnings)

    def _build_network(self, spec: MapFile) -> InMemoryNetwork:
        bounds = BoundingBox(*spec.bounds) if spec.bounds else None
        network = InMemoryNetwork(bounds=bounds)
        for road in spec.roads:
            try:
                network.add_road(
                    road.id,
                    road.name,
                    [(lane.id, lane.type, lane.points) for lane in road.lanes],
                )
            except ValueError as e:
                raise MapLoadError(str(e)) from e
        return network
