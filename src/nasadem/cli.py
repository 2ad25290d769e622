"""Command-line interface for the NASADEM decoder."""

from itertools import islice
from pathlib import Path
from typing import Optional
import logging
import zipfile

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .archive import open_tile, resolve_tile_path
from .config import DecodeConfig, get_preset, list_presets
from .coordinates import SAMPLE_COUNT, tile_name
from .errors import NASADEMError
from .tile import Tile

app = typer.Typer(
    name="nasadem",
    help="Decode NASADEM elevation and water tiles.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"nasadem version {__version__}")
        raise typer.Exit()


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level_callback(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return level


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        callback=log_level_callback,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
):
    """NASADEM tile decoder."""
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _build_config(
    config_path: Optional[Path],
    data_dir: Optional[Path],
    strict: Optional[bool],
) -> DecodeConfig:
    config = DecodeConfig.load(config_path) if config_path else DecodeConfig()
    if data_dir is not None:
        config.data_dir = data_dir
    if strict is not None:
        config.strict_water = strict

    try:
        config.validate()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    return config


def _load(target: str, config: DecodeConfig) -> Tile:
    """Open a tile given a path, a tile name or a preset name."""
    preset = get_preset(target)
    if preset is not None:
        path = resolve_tile_path(config.data_dir, tile_name(preset))
    elif Path(target).exists():
        path = Path(target)
    else:
        path = resolve_tile_path(config.data_dir, target)

    return open_tile(
        path,
        elevation=config.load_elevation,
        water=config.load_water,
        strict_water=config.strict_water,
    )


def _resolve_or_exit(target: str, config: DecodeConfig) -> Tile:
    try:
        return _load(target, config)
    except (NASADEMError, zipfile.BadZipFile, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def info(
    target: str = typer.Argument(..., help="Tile path, tile name (n38w106) or preset"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Directory holding tiles"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Reject invalid water bytes"),
):
    """Show a summary of a tile.

    Example:
        nasadem info NASADEM_HGT_n38w106.zip
    """
    config = _build_config(config_path, data_dir, strict)
    tile = _resolve_or_exit(target, config)

    min_lon, min_lat, max_lon, max_lat = tile.bounds

    table = Table(title=f"Tile {tile.name}")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Southwest corner", f"({tile.southwest_corner.lat}, {tile.southwest_corner.lon})")
    table.add_row("Bounds", f"({min_lat:.1f}, {min_lon:.1f}) to ({max_lat:.1f}, {max_lon:.1f})")

    if tile.elevation is not None:
        table.add_row("Elevation min", f"{int(tile.elevation.min())} m")
        table.add_row("Elevation max", f"{int(tile.elevation.max())} m")
        table.add_row("Elevation mean", f"{float(tile.elevation.mean()):.1f} m")
    else:
        table.add_row("Elevation", "[dim]not loaded[/dim]")

    if tile.water is not None:
        table.add_row("Water fraction", f"{100.0 * float(tile.water.mean()):.2f}%")
    else:
        table.add_row("Water", "[dim]not loaded[/dim]")

    console.print(table)


@app.command()
def cells(
    target: str = typer.Argument(..., help="Tile path, tile name (n38w106) or preset"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Number of cells to show"),
    skip: int = typer.Option(0, "--skip", min=0, help="Cells to skip from the northwest corner"),
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Directory holding tiles"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Reject invalid water bytes"),
):
    """List cells of a tile in storage order.

    Example:
        nasadem cells n38w106 --data-dir data --limit 5
    """
    config = _build_config(config_path, data_dir, strict)
    if limit is not None:
        config.cell_limit = limit
    if config.cell_limit is None:
        config.cell_limit = 10

    tile = _resolve_or_exit(target, config)

    table = Table(title=f"Cells of {tile.name}")
    table.add_column("Index", justify="right")
    table.add_column("Lon", justify="right")
    table.add_column("Lat", justify="right")
    table.add_column("Elevation", justify="right")
    table.add_column("Water")
    table.add_column("Polygon")

    start = min(skip, SAMPLE_COUNT)
    cells_shown = islice(tile.iterate(start=start), config.cell_limit)
    for index, cell in enumerate(cells_shown, start=start):
        table.add_row(
            str(index),
            f"{cell.southwest_corner.lon:.6f}",
            f"{cell.southwest_corner.lat:.6f}",
            "-" if cell.elevation is None else str(cell.elevation),
            "-" if cell.is_water is None else ("yes" if cell.is_water else "no"),
            cell.polygon().wkt,
        )

    console.print(table)


@app.command("list-presets")
def list_presets_cmd():
    """List preset tile anchors."""
    table = Table(title="Available Presets")
    table.add_column("Name", style="cyan")
    table.add_column("Tile")

    for name in list_presets():
        table.add_row(name, tile_name(get_preset(name)))

    console.print(table)


if __name__ == "__main__":
    app()
