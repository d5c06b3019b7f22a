"""
Pytest configuration and fixtures for mapconnect tests.

Provides reusable test fixtures for:
- A small synthetic road network
- Square footprints placed around it
- A silent progress context
"""

import pytest
from pathlib import Path

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from shapely.geometry import Polygon, box

from mapconnect.core.models import OriginalBuilding, RawBuilding, RawParkingLot
from mapconnect.network import InMemoryNetwork, LaneType
from mapconnect.utils.timer import Timer


def square(cx: float, cy: float, half: float = 5.0) -> Polygon:
    """Axis-aligned square footprint centered on (cx, cy)."""
    return box(cx - half, cy - half, cx + half, cy + half)


# =============================================================================
# NETWORK FIXTURES
# =============================================================================

@pytest.fixture
def network() -> InMemoryNetwork:
    """
    Three roads:

    - Main St (x 0..200): sidewalk at y=10, driving lane at y=5, sidewalk at y=0
    - Quiet Path (x=500, y 0..200): a lone sidewalk, no driving lane
    - Stub St (x 1000..1010): sidewalk and a 10m driving lane, too short for
      any driveway
    """
    net = InMemoryNetwork()
    net.add_road(1, "Main St", [
        (1, LaneType.SIDEWALK, [(0, 10), (200, 10)]),
        (2, LaneType.DRIVING, [(0, 5), (200, 5)]),
        (3, LaneType.SIDEWALK, [(0, 0), (200, 0)]),
    ])
    net.add_road(2, "Quiet Path", [
        (20, LaneType.SIDEWALK, [(500, 0), (500, 200)]),
    ])
    net.add_road(3, "Stub St", [
        (30, LaneType.SIDEWALK, [(1000, 10), (1010, 10)]),
        (31, LaneType.DRIVING, [(1000, 5), (1010, 5)]),
    ])
    return net


@pytest.fixture
def timer() -> Timer:
    """Progress context with no display."""
    return Timer("test", show_progress=False)


# =============================================================================
# FOOTPRINT FIXTURES
# =============================================================================

@pytest.fixture
def raw_buildings() -> dict:
    """
    Five buildings, in this order:

    - 100: 20m north of Main St, full address; connects with a driveway
    - 200: 300m from everything; unreachable
    - 300: centered on the Main St sidewalk; zero-length front path
    - 400: next to Quiet Path; no driving lane there
    - 500: at the west end of Main St; driveway would be within the buffer
    """
    return {
        OriginalBuilding(100): RawBuilding(
            polygon=square(100, 30),
            osm_tags={"addr:housenumber": "10", "addr:street": "Main St", "name": "Town Hall"},
            public_garage_name="Civic Garage",
            num_parking_spots=12,
            amenities=(("Town Hall Cafe", "cafe"),),
        ),
        OriginalBuilding(200): RawBuilding(polygon=square(100, 300)),
        OriginalBuilding(300): RawBuilding(polygon=square(50, 10, half=3)),
        OriginalBuilding(400): RawBuilding(polygon=square(520, 100), num_parking_spots=3),
        OriginalBuilding(500): RawBuilding(
            polygon=square(3, 30, half=2),
            osm_tags={"addr:street": "Elm St"},
        ),
    }


@pytest.fixture
def raw_parking_lots() -> list:
    """
    Four lots, in this order:

    - 1: 20x20 next to Main St, no declared capacity; connects
    - 2: next to Quiet Path, declares 50 spots; no driveway
    - 3: far outside the map; unreachable
    - 4: 2x23 next to Main St, no declared capacity; connects
    """
    return [
        RawParkingLot(osm_id=1, polygon=box(60, 20, 80, 40)),
        RawParkingLot(osm_id=2, polygon=square(530, 50), capacity=50),
        RawParkingLot(osm_id=3, polygon=square(5000, 5000)),
        RawParkingLot(osm_id=4, polygon=box(120, 20, 122, 43)),
    ]
