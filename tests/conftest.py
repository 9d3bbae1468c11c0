"""
Shared fixtures for Tile Glitch unit tests
"""

import random

import pytest

from src.pod1_tilesets.image_source import ArrayImageSource
from src.pod1_tilesets.schemas import TileSource

from tests.helpers import RecordingSink, solid_tileset


@pytest.fixture
def make_source():
    """Build a TileSource of cols x rows solid tiles"""
    def _make(cols: int, rows: int, base: int = 0, name: str = None) -> TileSource:
        return TileSource(image=ArrayImageSource(solid_tileset(cols, rows, base)), name=name)
    return _make


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def recording_sink():
    return RecordingSink()
