"""
Map file ingestion.
"""

from .map_loader import LoadedMap, MapFile, MapLoader, MapLoadError

__all__ = [
    "LoadedMap",
    "MapFile",
    "MapLoader",
    "MapLoadError",
]
