"""Coordinate conversion for NASADEM 1 arc-second tiles.

Tiles are named by their southwest corner. For example, n38w106 covers
latitudes 38-39N and longitudes 105-106W.

Samples are stored row by row from north to south, west to east, so
sample index 0 is the northwest corner of the tile, not the southwest.
Every point returned from this module is the southwest corner of a cell.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Union
import math
import re

from .errors import TileNameError


# Samples per row/column, including the row/column shared with neighbours
SAMPLES_PER_SIDE = 3601

# Samples in one tile
SAMPLE_COUNT = SAMPLES_PER_SIDE * SAMPLES_PER_SIDE

# Angular size of one cell in degrees
CELL_SIZE_DEGREES = 1.0 / SAMPLES_PER_SIDE

_TILE_NAME_RE = re.compile(r"([NS])(\d{2})([EW])(\d{3})", re.IGNORECASE)


class LonLat(NamedTuple):
    """Longitude/latitude pair in decimal degrees (x, y order)."""
    lon: float
    lat: float


@dataclass(frozen=True)
class TileCoord:
    """Tile anchor (integer lat/lon of the southwest corner)."""
    lat: int
    lon: int

    def __post_init__(self):
        if not (-90 <= self.lat < 90):
            raise ValueError(f"Invalid tile latitude: {self.lat}")
        if not (-180 <= self.lon < 180):
            raise ValueError(f"Invalid tile longitude: {self.lon}")


def index_to_point(southwest_corner: TileCoord, index: int) -> LonLat:
    """Map a linear sample index to the southwest corner of its cell.

    Args:
        southwest_corner: Tile anchor
        index: Sample index in storage order, 0 <= index < SAMPLE_COUNT

    Returns:
        LonLat of the cell's southwest corner

    Raises:
        IndexError: If index is outside the tile
    """
    if not (0 <= index < SAMPLE_COUNT):
        raise IndexError(f"Sample index out of range: {index}")

    # Storage starts at the north row; rows here count up from the south
    row = (SAMPLES_PER_SIDE - 1) - (index // SAMPLES_PER_SIDE)
    col = index % SAMPLES_PER_SIDE

    lat = southwest_corner.lat + row / float(SAMPLES_PER_SIDE)
    lon = southwest_corner.lon + col / float(SAMPLES_PER_SIDE)
    return LonLat(lon, lat)


def point_to_index(southwest_corner: TileCoord, lon: float, lat: float) -> int:
    """Inverse of index_to_point, snapping to the nearest lattice corner.

    Raises:
        ValueError: If the point does not fall on the tile's lattice
    """
    row = int(round((lat - southwest_corner.lat) * SAMPLES_PER_SIDE))
    col = int(round((lon - southwest_corner.lon) * SAMPLES_PER_SIDE))

    if not (0 <= row < SAMPLES_PER_SIDE and 0 <= col < SAMPLES_PER_SIDE):
        raise ValueError(f"Point ({lon}, {lat}) is outside tile {tile_name(southwest_corner)}")

    return (SAMPLES_PER_SIDE - 1 - row) * SAMPLES_PER_SIDE + col


def cell_index_at(southwest_corner: TileCoord, lon: float, lat: float) -> int:
    """Index of the cell containing a point.

    Points on the tile's north or east edge map to the last row/column.
    The caller is expected to check the point lies within the tile.
    """
    row = int(math.floor((lat - southwest_corner.lat) * SAMPLES_PER_SIDE))
    col = int(math.floor((lon - southwest_corner.lon) * SAMPLES_PER_SIDE))

    # Clamp to valid range
    row = max(0, min(SAMPLES_PER_SIDE - 1, row))
    col = max(0, min(SAMPLES_PER_SIDE - 1, col))

    return (SAMPLES_PER_SIDE - 1 - row) * SAMPLES_PER_SIDE + col


def tile_for_point(lat: float, lon: float) -> TileCoord:
    """Get the anchor of the tile containing a location.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Returns:
        TileCoord of the southwest corner
    """
    return TileCoord(
        lat=int(math.floor(lat)),
        lon=int(math.floor(lon))
    )


def tile_name(coord: TileCoord) -> str:
    """Get the NASADEM tile name for an anchor.

    Example: n38w106 for the tile anchored at (38, -106)
    """
    lat_str = f"n{coord.lat:02d}" if coord.lat >= 0 else f"s{abs(coord.lat):02d}"
    lon_str = f"e{coord.lon:03d}" if coord.lon >= 0 else f"w{abs(coord.lon):03d}"
    return f"{lat_str}{lon_str}"


def parse_tile_name(name: Union[str, Path]) -> TileCoord:
    """Parse a tile anchor from a tile, file or archive name.

    Accepts "n38w106", "N38W106.hgt" and "NASADEM_HGT_n38w106.zip".

    Raises:
        TileNameError: If no tile name is found
    """
    match = _TILE_NAME_RE.search(Path(name).name)
    if match is None:
        raise TileNameError(f"Invalid NASADEM tile name: {name}")

    ns, lat_digits, ew, lon_digits = match.groups()
    lat = int(lat_digits)
    lon = int(lon_digits)
    if ns.upper() == "S":
        lat = -lat
    if ew.upper() == "W":
        lon = -lon

    try:
        return TileCoord(lat=lat, lon=lon)
    except ValueError as e:
        raise TileNameError(f"Invalid NASADEM tile name: {name} ({e})") from e
