"""Tests for decode configuration and presets."""

from pathlib import Path

import pytest

from nasadem import DecodeConfig, TileCoord, get_preset, list_presets


def test_defaults_are_valid():
    config = DecodeConfig()
    config.validate()
    assert config.strict_water is True
    assert config.data_dir == Path("data")


def test_save_and_load(tmp_path):
    config = DecodeConfig(
        data_dir=tmp_path / "tiles",
        strict_water=False,
        load_water=False,
        cell_limit=25,
    )
    path = tmp_path / "config.json"
    config.save(path)

    loaded = DecodeConfig.load(path)
    assert loaded == config


def test_load_fills_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"strict_water": false}')

    config = DecodeConfig.load(path)
    assert config.strict_water is False
    assert config.load_elevation is True
    assert config.cell_limit is None


def test_validate_requires_a_layer():
    with pytest.raises(ValueError):
        DecodeConfig(load_elevation=False, load_water=False).validate()


def test_validate_cell_limit():
    with pytest.raises(ValueError):
        DecodeConfig(cell_limit=-1).validate()


def test_presets():
    assert get_preset("rocky_mountains") == TileCoord(lat=38, lon=-106)
    assert get_preset("Rocky Mountains") == TileCoord(lat=38, lon=-106)
    assert get_preset("atlantis") is None
    assert "grand_canyon" in list_presets()


def test_preset_accepts_tile_names():
    assert get_preset("n38w106") == TileCoord(lat=38, lon=-106)
    assert get_preset("S34E150") == TileCoord(lat=-34, lon=150)
    assert get_preset("NASADEM_HGT_n38w106.zip") is None
    assert get_preset("n38w106.hgt") is None
