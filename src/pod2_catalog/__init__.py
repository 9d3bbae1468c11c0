"""
POD 2: Catalog Module
Slices tilesets into the tile catalog and keeps it in step with the tileset list
"""

from .extractor import TileExtractor
from .registry import TilesetRegistry
from .schemas import ExtractionConfig, Tile, TileCatalog

__all__ = [
    "TileExtractor",
    "TilesetRegistry",
    "ExtractionConfig",
    "Tile",
    "TileCatalog"
]
