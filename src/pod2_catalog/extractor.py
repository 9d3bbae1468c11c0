"""
Tile Extractor - slices tilesets into a flat tile catalog
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .schemas import ExtractionConfig, Tile, TileCatalog
from ..pod1_tilesets.schemas import RGBColor, TileSource

logger = logging.getLogger(__name__)


class TileExtractor:
    """
    Builds a TileCatalog from scratch for a list of tilesets,
    optionally discarding tiles containing an excluded color
    """
    
    def __init__(self, config: Optional[ExtractionConfig] = None):
        """
        Initialize tile extractor
        
        Args:
            config: Extraction configuration
        """
        self.config = config or ExtractionConfig()
    
    def grid_shape(self, width: int, height: int) -> tuple:
        """(rows, cols) of whole tiles in an image"""
        ts = self.config.tile_size
        return height // ts, width // ts
    
    def extract(
        self,
        sources: Sequence[TileSource],
        exclude_color: Optional[RGBColor] = None
    ) -> TileCatalog:
        """
        Slice tilesets into a catalog
        
        Tiles are enumerated row-major within a tileset, tilesets in
        input order.
        
        Args:
            sources: Tilesets to slice
            exclude_color: Tiles containing this color are dropped
            
        Returns:
            TileCatalog
        """
        tiles: List[Tile] = []
        
        for source_index, source in enumerate(sources):
            rows, cols = self.grid_shape(source.width, source.height)
            if rows == 0 or cols == 0:
                logger.debug(f"Tileset {source.source_id} has no whole tiles")
                continue
            
            blocked = self._excluded_mask(source, rows, cols, exclude_color)
            ts = self.config.tile_size
            for row in range(rows):
                for col in range(cols):
                    if blocked is not None and blocked[row, col]:
                        continue
                    tiles.append(Tile(source_index=source_index, x=col * ts, y=row * ts))
        
        catalog = TileCatalog(
            tiles=tiles,
            source_ids=[s.source_id for s in sources],
            source_sizes=[s.size for s in sources],
            tile_size=self.config.tile_size,
            exclude_color=exclude_color
        )
        
        logger.info(f"Sliced {len(tiles)} tiles from {len(sources)} tileset(s)")
        return catalog
    
    def _excluded_mask(
        self,
        source: TileSource,
        rows: int,
        cols: int,
        exclude_color: Optional[RGBColor]
    ) -> Optional[np.ndarray]:
        """
        Per-tile flags marking tiles that hold at least one pixel within
        tolerance of the excluded color on all three channels
        
        Returns:
            (rows, cols) boolean array, or None when nothing is excluded
        """
        if exclude_color is None:
            return None
        
        ts = self.config.tile_size
        near = self._near_mask(source.sample(0, 0, cols * ts, rows * ts), exclude_color)
        return near.reshape(rows, ts, cols, ts).any(axis=(1, 3))
    
    def tile_has_excluded_color(
        self,
        source: TileSource,
        tile: Tile,
        exclude_color: Optional[RGBColor]
    ) -> bool:
        """Check a single tile region against the excluded color"""
        if exclude_color is None:
            return False
        
        ts = self.config.tile_size
        return bool(self._near_mask(source.sample(tile.x, tile.y, ts, ts), exclude_color).any())
    
    def _near_mask(self, pixels: np.ndarray, color: RGBColor) -> np.ndarray:
        """Pixels within tolerance of color on all three RGB channels"""
        target = np.array(color.as_tuple(), dtype=np.int16)
        return np.all(np.abs(pixels[..., :3].astype(np.int16) - target) < self.config.tolerance, axis=-1)
