"""Command-line interface for nearby place search.

Commands:
- search: Find places near the saved or live location
- save: Save the current location
- load: Load and show the saved location
- info: Show system information
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from placefinder.config.loader import get_default_config_path, load_config
from placefinder.config.schema import AppConfig
from placefinder.entities import Coordinate, ResultSet
from placefinder.observability.logging import configure_logging, get_logger
from placefinder.pipelines.search import AnchorUnavailableError, SearchFailedError
from placefinder.providers.base import ProviderError
from placefinder.service.factory import open_session
from placefinder.storage.base import StorageError

app = typer.Typer(
    name="placefinder",
    help="Find nearby places from your saved or current location",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _live_position(lat: Optional[float], lon: Optional[float]) -> Optional[Coordinate]:
    """Build the live fix from CLI options; both or neither must be given."""
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        console.print("[red]--lat and --lon must be given together[/red]")
        raise typer.Exit(1)
    return Coordinate(latitude=lat, longitude=lon)


@app.command()
def search(
    query: str = typer.Argument("", help="Search query (may be empty)"),
    lat: Optional[float] = typer.Option(None, "--lat", help="Live latitude in decimal degrees"),
    lon: Optional[float] = typer.Option(None, "--lon", help="Live longitude in decimal degrees"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
):
    """Search for places near the current anchor."""
    asyncio.run(_search_async(query, _live_position(lat, lon), config_file))


async def _search_async(query: str, live: Optional[Coordinate], config_file: Optional[Path]):
    """Async implementation of search command."""
    config = _load_config(config_file)

    try:
        async with open_session(config) as session:
            if live:
                session.update_live_position(live)

            anchor = session.resolve_anchor()
            if anchor.coordinate:
                console.print(
                    f"[cyan]Searching near {anchor.coordinate} ({anchor.source.value} location)...[/cyan]"
                )

            result_set = await session.search(query)

    except AnchorUnavailableError as e:
        console.print(f"[red]{escape(str(e))}. Pass --lat/--lon or save a location first.[/red]")
        raise typer.Exit(1)
    except SearchFailedError as e:
        logger.error("search_error", query=query, error=str(e))
        console.print(f"[red]Search error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except (ProviderError, StorageError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _print_results(result_set)


def _print_results(result_set: ResultSet) -> None:
    if result_set.is_empty:
        console.print("[yellow]No results found[/yellow]")
        return

    table = Table(title=f"Places for '{escape(result_set.query)}'")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Place", style="bold")
    table.add_column("Distance", style="green")
    table.add_column("Coordinate", style="cyan")

    for i, place in enumerate(result_set.places, 1):
        table.add_row(str(i), escape(place.title), place.distance_label, str(place.coordinate))

    console.print(table)


@app.command()
def save(
    lat: Optional[float] = typer.Option(None, "--lat", help="Live latitude in decimal degrees"),
    lon: Optional[float] = typer.Option(None, "--lon", help="Live longitude in decimal degrees"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
):
    """Save the current location (live if given, otherwise the saved one)."""
    asyncio.run(_save_async(_live_position(lat, lon), config_file))


async def _save_async(live: Optional[Coordinate], config_file: Optional[Path]):
    """Async implementation of save command."""
    config = _load_config(config_file)

    try:
        async with open_session(config) as session:
            if live:
                session.update_live_position(live)
            saved = await session.save_current_location()
    except (AnchorUnavailableError, ProviderError, StorageError) as e:
        console.print(f"[red]Failed to save location: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Saved current location {saved}[/green]")


@app.command()
def load(
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
):
    """Load the saved location."""
    asyncio.run(_load_async(config_file))


async def _load_async(config_file: Optional[Path]):
    """Async implementation of load command."""
    config = _load_config(config_file)

    try:
        async with open_session(config) as session:
            location = await session.load_saved_location()
    except (ProviderError, StorageError) as e:
        console.print(f"[red]Failed to load location: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if location is None:
        console.print("[yellow]No saved location[/yellow]")
    else:
        console.print(f"[green]✓ Loaded saved location {location}[/green]")


@app.command()
def info(
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
):
    """Show system information and configuration."""
    config = _load_config(config_file)

    table = Table(title="Placefinder System Information")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Data Directory", str(config.data_dir))
    table.add_row("Log Level", config.log_level.value)
    table.add_row("Place Search Provider", config.place_search.provider.value)
    table.add_row("Coordinate Store", config.coordinate_store.store_type.value)
    table.add_row("Store Location", config.coordinate_store.connection_string)
    table.add_row("Max Results", str(config.search.max_results))
    table.add_row(
        "Default Location",
        str(config.initial_location) if config.initial_location else "disabled",
    )

    console.print(table)


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """Load configuration and setup logging."""
    if config_file is None:
        config_file = get_default_config_path()

    config = load_config(config_file)
    configure_logging(
        level=config.log_level.value,
        json_logs=config.json_logs,
        log_dir=config.log_dir,
    )

    return config


if __name__ == "__main__":
    app()
