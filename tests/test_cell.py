"""Tests for cell records and their polygons."""

import dataclasses

import pytest

from nasadem import CELL_SIZE_DEGREES, Cell, LonLat


def make_cell(**kwargs):
    return Cell(southwest_corner=LonLat(-106.0, 38.99972229936129), **kwargs)


def test_accessors_default_to_none():
    cell = make_cell()
    assert cell.elevation is None
    assert cell.is_water is None
    assert cell.southwest_corner == (-106.0, 38.99972229936129)


def test_accessors_keep_loaded_values():
    cell = make_cell(elevation=0, is_water=False)
    # Loaded zero/land is distinct from absent
    assert cell.elevation == 0
    assert cell.is_water is False


def test_cell_is_immutable():
    cell = make_cell(elevation=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cell.elevation = 20


def test_polygon_is_closed_five_point_ring():
    coords = list(make_cell().polygon().exterior.coords)
    assert len(coords) == 5
    assert coords[0] == coords[4]
    assert len(set(coords[:4])) == 4


def test_polygon_corner_order():
    lon, lat = -106.0, 38.5
    coords = list(Cell(LonLat(lon, lat)).polygon().exterior.coords)
    east = lon + CELL_SIZE_DEGREES
    north = lat + CELL_SIZE_DEGREES
    assert coords == [
        (lon, lat),
        (east, lat),
        (east, north),
        (lon, north),
        (lon, lat),
    ]


def test_polygon_is_axis_aligned_square():
    polygon = make_cell().polygon()
    min_x, min_y, max_x, max_y = polygon.bounds
    assert max_x - min_x == pytest.approx(1 / 3601)
    assert max_y - min_y == pytest.approx(1 / 3601)
    assert polygon.area == pytest.approx((1 / 3601) ** 2)
    assert list(polygon.interiors) == []
    assert polygon.is_valid
