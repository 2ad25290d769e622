"""Locating and opening NASADEM tiles on disk.

NASADEM is distributed as one zip per tile (NASADEM_HGT_n38w106.zip)
holding n38w106.hgt, n38w106.swb and a few auxiliary layers. Tiles may
also be extracted into a directory or kept as loose .hgt/.swb files.
"""

from pathlib import Path
from typing import Optional, Union
import logging
import zipfile

from .coordinates import parse_tile_name, tile_name
from .tile import Tile

logger = logging.getLogger(__name__)


def _find_member(archive: zipfile.ZipFile, filename: str) -> Optional[str]:
    for member in archive.namelist():
        if Path(member).name.lower() == filename:
            return member
    return None


def _find_file(directory: Path, filename: str) -> Optional[Path]:
    for candidate in directory.iterdir():
        if candidate.is_file() and candidate.name.lower() == filename:
            return candidate
    return None


def resolve_tile_path(data_dir: Union[str, Path], name: str) -> Path:
    """Find a tile in a data directory by name.

    Looks for NASADEM_HGT_<name>.zip, then a NASADEM_HGT_<name> or <name>
    directory, then a loose <name>.hgt.

    Raises:
        FileNotFoundError: If no candidate exists
    """
    data_dir = Path(data_dir)
    name = tile_name(parse_tile_name(name))

    candidates = [
        data_dir / f"NASADEM_HGT_{name}.zip",
        data_dir / f"NASADEM_HGT_{name}",
        data_dir / name,
        data_dir / f"{name}.hgt",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate

    raise FileNotFoundError(f"Tile {name} not found in {data_dir}")


def open_tile(
    path: Union[str, Path],
    *,
    elevation: bool = True,
    water: bool = True,
    strict_water: bool = True,
) -> Tile:
    """Load a tile from a zip archive, a directory or a loose .hgt file.

    The tile anchor is parsed from the file name. For a loose .hgt file
    the sibling .swb is loaded only if it exists.

    Args:
        path: Archive, directory or .hgt path
        elevation: Load the elevation grid
        water: Load the water grid
        strict_water: Reject water bytes other than 0 and 255

    Returns:
        Tile with the requested grids loaded

    Raises:
        FileNotFoundError: If a requested grid is missing
        TileNameError: If the path does not contain a tile name
    """
    path = Path(path)
    coord = parse_tile_name(path.name)
    tile = Tile(coord)
    name = tile.name

    if path.is_file() and path.suffix.lower() == ".zip":
        with zipfile.ZipFile(path) as archive:
            for wanted, ext in ((elevation, "hgt"), (water, "swb")):
                if not wanted:
                    continue
                member = _find_member(archive, f"{name}.{ext}")
                if member is None:
                    raise FileNotFoundError(f"{name}.{ext} not found in {path}")
                with archive.open(member) as f:
                    _load(tile, ext, f, strict_water)

    elif path.is_dir():
        for wanted, ext in ((elevation, "hgt"), (water, "swb")):
            if not wanted:
                continue
            found = _find_file(path, f"{name}.{ext}")
            if found is None:
                raise FileNotFoundError(f"{name}.{ext} not found in {path}")
            with open(found, "rb") as f:
                _load(tile, ext, f, strict_water)

    elif path.is_file():
        if elevation:
            with open(path.with_suffix(".hgt"), "rb") as f:
                _load(tile, "hgt", f, strict_water)
        swb = path.with_suffix(".swb")
        if water and swb.exists():
            with open(swb, "rb") as f:
                _load(tile, "swb", f, strict_water)
        elif water:
            logger.debug("No water layer next to %s", path)

    else:
        raise FileNotFoundError(f"Tile not found: {path}")

    return tile


def _load(tile: Tile, ext: str, source, strict_water: bool) -> None:
    logger.info("Decoding %s.%s", tile.name, ext)
    if ext == "hgt":
        tile.load_elevation(source)
    else:
        tile.load_water(source, strict=strict_water)
