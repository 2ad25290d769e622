"""Decoder for NASADEM 1 arc-second elevation and water tiles."""

__version__ = "0.1.0"

from .coordinates import (
    CELL_SIZE_DEGREES,
    SAMPLE_COUNT,
    SAMPLES_PER_SIDE,
    LonLat,
    TileCoord,
    index_to_point,
    point_to_index,
    cell_index_at,
    tile_for_point,
    tile_name,
    parse_tile_name,
)
from .cell import Cell
from .tile import Tile, CellIterator, LAND, WATER
from .archive import open_tile, resolve_tile_path
from .config import DecodeConfig, PRESET_TILES, get_preset, list_presets
from .errors import (
    NASADEMError,
    TruncatedTileError,
    TileFormatError,
    InvalidWaterSampleError,
    TileNameError,
)

__all__ = [
    # Coordinates
    "CELL_SIZE_DEGREES",
    "SAMPLE_COUNT",
    "SAMPLES_PER_SIDE",
    "LonLat",
    "TileCoord",
    "index_to_point",
    "point_to_index",
    "cell_index_at",
    "tile_for_point",
    "tile_name",
    "parse_tile_name",
    # Tiles
    "Cell",
    "Tile",
    "CellIterator",
    "LAND",
    "WATER",
    "open_tile",
    "resolve_tile_path",
    # Config
    "DecodeConfig",
    "PRESET_TILES",
    "get_preset",
    "list_presets",
    # Errors
    "NASADEMError",
    "TruncatedTileError",
    "TileFormatError",
    "InvalidWaterSampleError",
    "TileNameError",
]
