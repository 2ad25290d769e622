"""Configuration for NASADEM decoding."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any
import json

from .coordinates import TileCoord, parse_tile_name, tile_name
from .errors import TileNameError


@dataclass
class DecodeConfig:
    """Configuration for loading and iterating tiles."""
    # Directory searched when a tile is given by name
    data_dir: Path = field(default_factory=lambda: Path("data"))

    # Reject water bytes other than 0/255 instead of coercing nonzero to water
    strict_water: bool = True

    # Layers to decode
    load_elevation: bool = True
    load_water: bool = True

    # Maximum cells to emit when listing (None for all)
    cell_limit: Optional[int] = None

    def validate(self) -> None:
        """Validate the configuration."""
        if not (self.load_elevation or self.load_water):
            raise ValueError("At least one of load_elevation/load_water must be enabled")
        if self.cell_limit is not None and self.cell_limit < 0:
            raise ValueError(f"cell_limit must be >= 0: {self.cell_limit}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "data_dir": str(self.data_dir),
            "strict_water": self.strict_water,
            "load_elevation": self.load_elevation,
            "load_water": self.load_water,
            "cell_limit": self.cell_limit,
        }

    def save(self, filepath: Path) -> None:
        """Save configuration to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path) -> "DecodeConfig":
        """Load configuration from JSON file."""
        with open(filepath) as f:
            data = json.load(f)

        return cls(
            data_dir=Path(data.get("data_dir", "data")),
            strict_water=data.get("strict_water", True),
            load_elevation=data.get("load_elevation", True),
            load_water=data.get("load_water", True),
            cell_limit=data.get("cell_limit"),
        )


# Named tile anchors for common areas
PRESET_TILES = {
    "rocky_mountains": TileCoord(lat=38, lon=-106),
    "grand_canyon": TileCoord(lat=36, lon=-113),
    "mount_everest": TileCoord(lat=27, lon=86),
    "alps_matterhorn": TileCoord(lat=45, lon=7),
    "death_valley": TileCoord(lat=36, lon=-117),
    "lake_tahoe": TileCoord(lat=39, lon=-121),
}


def get_preset(name: str) -> Optional[TileCoord]:
    """Get a tile anchor by preset name or bare tile name (e.g., "n38w106").

    File and archive names are not matched; use parse_tile_name for those.
    """
    key = name.lower().replace("-", "_").replace(" ", "_")
    if key in PRESET_TILES:
        return PRESET_TILES[key]

    try:
        coord = parse_tile_name(key)
    except TileNameError:
        return None
    return coord if tile_name(coord) == key else None


def list_presets() -> list[str]:
    """Get list of available preset names."""
    return list(PRESET_TILES.keys())
