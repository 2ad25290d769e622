"""Shared fixtures: synthetic NASADEM streams built with numpy."""

import io
import zipfile

import numpy as np
import pytest

from nasadem import SAMPLE_COUNT, TileCoord


@pytest.fixture
def anchor():
    return TileCoord(lat=38, lon=-106)


@pytest.fixture(scope="session")
def elevation_samples():
    """Elevation grid where each sample equals its index modulo 2**16."""
    return (np.arange(SAMPLE_COUNT, dtype=np.uint32) % 65536).astype(np.uint16)


@pytest.fixture(scope="session")
def hgt_bytes(elevation_samples):
    return elevation_samples.astype(">u2").tobytes()


@pytest.fixture(scope="session")
def swb_bytes():
    """Water grid with the northern half water and the southern half land."""
    samples = np.zeros(SAMPLE_COUNT, dtype=np.uint8)
    samples[: SAMPLE_COUNT // 2] = 255
    return samples.tobytes()


@pytest.fixture
def hgt_stream(hgt_bytes):
    return io.BytesIO(hgt_bytes)


@pytest.fixture
def swb_stream(swb_bytes):
    return io.BytesIO(swb_bytes)


@pytest.fixture(scope="session")
def tile_zip(tmp_path_factory, hgt_bytes, swb_bytes):
    """A NASADEM-style archive for n38w106."""
    path = tmp_path_factory.mktemp("tiles") / "NASADEM_HGT_n38w106.zip"
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as archive:
        archive.writestr("n38w106.hgt", hgt_bytes)
        archive.writestr("n38w106.swb", swb_bytes)
    return path
