"""
Connected entities JSON exporter.

Exports buildings and parking lots with their connectors, either as a plain
JSON document or as a GeoJSON FeatureCollection for map viewers.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console
from shapely.geometry import mapping

from ..core.models import Building, ParkingLot

console = Console()


class EntitiesJSONExporter:
    """
    Export connected entities to JSON.

    Supports:
    - Full export with every connector
    - GeoJSON export for mapping
    """

    def __init__(self, pretty: bool = True):
        """
        Initialize exporter.

        Args:
            pretty: Whether to format JSON with indentation
        """
        self.pretty = pretty

    def export(
        self,
        buildings: Sequence[Building],
        parking_lots: Sequence[ParkingLot],
        output_path: Path | str,
    ) -> Path:
        """
        Export all entities plus a summary block.

        Returns:
            Path to exported file
        """
        data = {
            "export_date": date.today().isoformat(),
            "summary": summarize(buildings, parking_lots),
            "buildings": [b.to_dict() for b in buildings],
            "parking_lots": [lot.to_dict() for lot in parking_lots],
        }
        path = self._write(data, output_path)
        console.print(f"[green]Exported entities JSON: {path}[/green]")
        return path

    def export_geojson(
        self,
        buildings: Sequence[Building],
        parking_lots: Sequence[ParkingLot],
        output_path: Path | str,
    ) -> Path:
        """Footprints, front paths and driveways as GeoJSON features."""
        features = []
        for b in buildings:
            props = {"kind": "building", "id": b.id, "address": b.address, "name": b.name}
            features.append(_feature(b.polygon, props))
            features.append(_feature(b.front_path.line, {"kind": "front_path", "building": b.id}))
            if b.parking is not None:
                features.append(_feature(
                    b.parking.driveway_line,
                    {"kind": "driveway", "building": b.id, "num_spots": b.parking.num_spots},
                ))
        for lot in parking_lots:
            features.append(_feature(
                lot.polygon,
                {"kind": "parking_lot", "id": lot.id, "osm_id": lot.osm_id, "capacity": lot.capacity},
            ))
            features.append(_feature(lot.driveway_line, {"kind": "driveway", "parking_lot": lot.id}))

        path = self._write({"type": "FeatureCollection", "features": features}, output_path)
        console.print(f"[green]Exported GeoJSON: {path}[/green]")
        return path

    def _write(self, data: Any, output_path: Path | str) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)
        return output_path


def summarize(buildings: Sequence[Building], parking_lots: Sequence[ParkingLot]) -> dict:
    """Headline counts for a batch."""
    with_parking = [b for b in buildings if b.parking is not None]
    return {
        "buildings": len(buildings),
        "buildings_with_driveway": len(with_parking),
        "building_parking_spots": sum(b.parking.num_spots for b in with_parking),
        "parking_lots": len(parking_lots),
        "parking_lot_capacity": sum(lot.capacity for lot in parking_lots),
    }


def _feature(geom, properties: dict) -> dict:
    return {"type": "Feature", "geometry": mapping(geom), "properties": properties}
