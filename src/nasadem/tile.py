"""NASADEM tile decoder.

NASADEM 1 arc-second tile format:
- Tiles are named like n38w106 and ship as NASADEM_HGT_n38w106.zip
- .hgt: 3601 x 3601 unsigned 16-bit big-endian integers (25934402 bytes)
- .swb: 3601 x 3601 bytes, 0 for land and 255 for water (12967201 bytes)
- Neither file has a header or footer

Data is stored row by row from north to south, west to east.
The first value is at the (north, west) corner, not southwest.
"""

from typing import BinaryIO, Iterator, Optional, Tuple
import logging

import numpy as np

from .cell import Cell
from .coordinates import (
    SAMPLE_COUNT,
    TileCoord,
    cell_index_at,
    index_to_point,
    tile_name,
)
from .errors import InvalidWaterSampleError, TruncatedTileError

logger = logging.getLogger(__name__)


# Sentinel bytes in .swb streams
LAND = 0
WATER = 255

ELEVATION_BYTES = SAMPLE_COUNT * 2
WATER_BYTES = SAMPLE_COUNT


def _read_exact(source: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly `size` bytes, looping over short reads."""
    buf = bytearray()
    while len(buf) < size:
        chunk = source.read(size - len(buf))
        if not chunk:
            raise TruncatedTileError(what, size, len(buf))
        buf += chunk
    return bytes(buf)


class Tile:
    """A 1x1 degree NASADEM tile with optional elevation and water grids.

    Grids are flat numpy arrays of SAMPLE_COUNT values in storage order
    (north row first). Use `index_to_point` to map an index to a location.
    """

    def __init__(self, southwest_corner: TileCoord):
        """Initialize an empty tile.

        Args:
            southwest_corner: Integer anchor of the tile
        """
        self.southwest_corner = southwest_corner
        self._elevation: Optional[np.ndarray] = None
        self._water: Optional[np.ndarray] = None
        # Bumped on every successful load so live iterators can detect it
        self._version = 0

    def __repr__(self) -> str:
        return (
            f"Tile({self.name}, elevation={self._elevation is not None}, "
            f"water={self._water is not None})"
        )

    @property
    def name(self) -> str:
        """Tile name (e.g., "n38w106")."""
        return tile_name(self.southwest_corner)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_lon, min_lat, max_lon, max_lat) of the tile."""
        lat = self.southwest_corner.lat
        lon = self.southwest_corner.lon
        return (float(lon), float(lat), float(lon + 1), float(lat + 1))

    @property
    def elevation(self) -> Optional[np.ndarray]:
        """Read-only elevation grid, or None if not loaded."""
        return self._elevation

    @property
    def water(self) -> Optional[np.ndarray]:
        """Read-only water grid, or None if not loaded."""
        return self._water

    def load_elevation(self, source: BinaryIO) -> "Tile":
        """Decode an .hgt stream into the elevation grid.

        The grid is replaced only after the full stream has been read.

        Args:
            source: Readable binary stream positioned at the first sample

        Returns:
            This tile, for chaining

        Raises:
            TruncatedTileError: If the stream ends early
        """
        raw = _read_exact(source, ELEVATION_BYTES, "elevation")

        # Big-endian uint16, converted to a native-order copy
        data = np.frombuffer(raw, dtype=">u2").astype(np.uint16)
        data.flags.writeable = False

        self._elevation = data
        self._version += 1
        logger.debug(
            "Loaded elevation for %s (min=%d, max=%d)",
            self.name, int(data.min()), int(data.max()),
        )
        return self

    def load_water(self, source: BinaryIO, strict: bool = True) -> "Tile":
        """Decode an .swb stream into the water grid.

        Args:
            source: Readable binary stream positioned at the first sample
            strict: Reject bytes other than 0 and 255. When False, any
                nonzero byte is treated as water.

        Returns:
            This tile, for chaining

        Raises:
            TruncatedTileError: If the stream ends early
            InvalidWaterSampleError: If strict and a byte is not a sentinel
        """
        raw = np.frombuffer(_read_exact(source, WATER_BYTES, "water"), dtype=np.uint8)

        invalid = (raw != LAND) & (raw != WATER)
        if invalid.any():
            first = int(np.flatnonzero(invalid)[0])
            if strict:
                raise InvalidWaterSampleError(first, int(raw[first]))
            logger.warning(
                "%s: %d water samples are not 0/255 (first at index %d); treating nonzero as water",
                self.name, int(invalid.sum()), first,
            )

        data = raw != LAND
        data.flags.writeable = False

        self._water = data
        self._version += 1
        logger.debug("Loaded water for %s (%d water samples)", self.name, int(data.sum()))
        return self

    def iterate(self, start: int = 0) -> "CellIterator":
        """Get a fresh iterator over the cells, in storage order.

        Args:
            start: Index of the first cell to yield
        """
        return CellIterator(self, start)

    def __iter__(self) -> Iterator[Cell]:
        return self.iterate()

    def _contains(self, lat: float, lon: float) -> bool:
        min_lon, min_lat, max_lon, max_lat = self.bounds
        return min_lat <= lat <= max_lat and min_lon <= lon <= max_lon

    def elevation_at(self, lat: float, lon: float) -> Optional[int]:
        """Get the elevation of the cell containing a coordinate.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Elevation in meters, or None if out of range or not loaded
        """
        if self._elevation is None or not self._contains(lat, lon):
            return None
        return int(self._elevation[cell_index_at(self.southwest_corner, lon, lat)])

    def is_water_at(self, lat: float, lon: float) -> Optional[bool]:
        """Get the water flag of the cell containing a coordinate."""
        if self._water is None or not self._contains(lat, lon):
            return None
        return bool(self._water[cell_index_at(self.southwest_corner, lon, lat)])


class CellIterator:
    """Cursor over a tile's cells.

    Yields one Cell per sample, north row first and west to east within a
    row. Loading a grid into the tile while the cursor is alive makes the
    next step raise RuntimeError.
    """

    def __init__(self, tile: Tile, start: int = 0):
        if not (0 <= start <= SAMPLE_COUNT):
            raise IndexError(f"Start index out of range: {start}")
        self._tile = tile
        self._elevation = tile.elevation
        self._water = tile.water
        self._version = tile._version
        self._index = start

    def __iter__(self) -> "CellIterator":
        return self

    def __length_hint__(self) -> int:
        return SAMPLE_COUNT - self._index

    def __next__(self) -> Cell:
        if self._index >= SAMPLE_COUNT:
            raise StopIteration
        if self._tile._version != self._version:
            raise RuntimeError(f"Tile {self._tile.name} was reloaded during iteration")

        i = self._index
        self._index += 1

        elevation = int(self._elevation[i]) if self._elevation is not None else None
        is_water = bool(self._water[i]) if self._water is not None else None
        return Cell(
            southwest_corner=index_to_point(self._tile.southwest_corner, i),
            elevation=elevation,
            is_water=is_water,
        )
