"""Per-cell records produced by iterating a tile."""

from dataclasses import dataclass
from typing import Optional

from shapely.geometry import Polygon

from .coordinates import CELL_SIZE_DEGREES, LonLat


@dataclass(frozen=True)
class Cell:
    """One 1/3601 degree square of a tile.

    Attributes:
        southwest_corner: Southwest corner of the cell
        elevation: Elevation sample in meters, or None if the tile has no elevation grid
        is_water: Water flag, or None if the tile has no water grid
    """
    southwest_corner: LonLat
    elevation: Optional[int] = None
    is_water: Optional[bool] = None

    def polygon(self) -> Polygon:
        """Footprint of the cell as a closed ring: SW, SE, NE, NW, SW."""
        lon_west, lat_south = self.southwest_corner
        lon_east = lon_west + CELL_SIZE_DEGREES
        lat_north = lat_south + CELL_SIZE_DEGREES

        return Polygon([
            (lon_west, lat_south),
            (lon_east, lat_south),
            (lon_east, lat_north),
            (lon_west, lat_north),
            (lon_west, lat_south),
        ])
