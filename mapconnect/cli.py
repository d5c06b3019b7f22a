"""
mapconnect CLI.

Command-line interface for connecting map footprints to the road network.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.config import settings
from .export.entities_json import EntitiesJSONExporter, summarize
from .ingest.map_loader import MapLoader, MapLoadError
from .make.buildings import make_all_buildings
from .make.parking_lots import make_all_parking_lots
from .utils.logging_config import ensure_logging
from .utils.timer import Timer

app = typer.Typer(
    name="mapconnect",
    help="Connect building and parking lot footprints to a road network",
    add_completion=False,
)
console = Console()


@app.command()
def connect(
    input_file: Path = typer.Argument(..., help="Input map JSON file"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write connected entities as JSON"
    ),
    geojson: Optional[Path] = typer.Option(
        None, "--geojson", help="Write footprints and connectors as GeoJSON"
    ),
    progress: bool = typer.Option(
        settings.show_progress, "--progress/--no-progress", help="Show progress bars"
    ),
):
    """
    Connect every footprint in a map file to its sidewalk and driving lane.

    Footprints that can't be connected are reported, not fatal.
    """
    ensure_logging()
    console.print(Panel.fit(
        "[bold blue]mapconnect[/bold blue]\n"
        "Footprint connection pipeline",
        border_style="blue"
    ))

    console.print(f"\n[cyan]Loading:[/cyan] {input_file}")
    try:
        loaded = MapLoader().load(input_file)
    except (FileNotFoundError, MapLoadError) as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    with Timer(f"connect {input_file.name}", show_progress=progress, console=console) as timer:
        timer.start("load map")
        world = loaded.get(timer)
        timer.stop("load map")

        console.print(f"[green]Loaded:[/green] {len(world.network)} lanes")
        console.print(f"  Buildings: {len(world.buildings)}")
        console.print(f"  Parking lots: {len(world.parking_lots)}")

        buildings = make_all_buildings(world.buildings, world.network, timer)
        parking_lots = make_all_parking_lots(world.parking_lots, world.network, timer)

    stats = summarize(buildings, parking_lots)
    table = Table(title="Connection Results")
    table.add_column("Kind", style="cyan")
    table.add_column("Input", style="white")
    table.add_column("Connected", style="green")
    table.add_column("With driveway", style="yellow")
    table.add_row(
        "Buildings",
        str(len(world.buildings)),
        str(stats["buildings"]),
        str(stats["buildings_with_driveway"]),
    )
    table.add_row(
        "Parking lots",
        str(len(world.parking_lots)),
        str(stats["parking_lots"]),
        str(stats["parking_lots"]),
    )
    console.print(table)
    console.print(
        f"  Parking spots: {stats['building_parking_spots']} in buildings, "
        f"{stats['parking_lot_capacity']} in lots"
    )

    exporter = EntitiesJSONExporter()
    if output:
        exporter.export(buildings, parking_lots, output)
    if geojson:
        exporter.export_geojson(buildings, parking_lots, geojson)

    console.print("\n[bold green]Done![/bold green]")


@app.command()
def version():
    """Show version information."""
    from . import __version__
    console.print(f"mapconnect v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
