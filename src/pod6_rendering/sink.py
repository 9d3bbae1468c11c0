"""
Raster sinks - drawing surfaces receiving tile blits and glitch fills
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

from ..pod1_tilesets.schemas import TileSource
from ..pod2_catalog.schemas import Tile
from ..pod5_glitch.schemas import CellRect

logger = logging.getLogger(__name__)


class RasterSink(ABC):
    """Drawing surface for generated patterns"""
    
    @abstractmethod
    def clear(self):
        """Reset the surface before a pass"""
    
    @abstractmethod
    def draw_tile(
        self,
        source: TileSource,
        tile: Tile,
        tile_size: int,
        rect: CellRect,
        mirrored: bool = False
    ):
        """Draw the tile's source region scaled into rect, replacing the cell"""
    
    @abstractmethod
    def fill_rect(self, rect: CellRect, color: Tuple[int, int, int], alpha: float):
        """Composite a translucent color over rect"""


class PillowRasterSink(RasterSink):
    """RGBA raster held in a Pillow image"""
    
    def __init__(self, width: int, height: int, background: Tuple[int, int, int, int] = (0, 0, 0, 0)):
        """
        Args:
            width: Raster width in pixels
            height: Raster height in pixels
            background: RGBA fill used by clear()
        """
        self.width = width
        self.height = height
        self.background = background
        self.image = Image.new("RGBA", (width, height), background)
    
    def clear(self):
        self.image = Image.new("RGBA", (self.width, self.height), self.background)
    
    def draw_tile(
        self,
        source: TileSource,
        tile: Tile,
        tile_size: int,
        rect: CellRect,
        mirrored: bool = False
    ):
        region = np.array(source.sample(tile.x, tile.y, tile_size, tile_size), dtype=np.uint8)
        patch = Image.fromarray(region)
        if patch.size != (rect.width, rect.height):
            patch = patch.resize((rect.width, rect.height), Image.Resampling.NEAREST)
        if mirrored:
            patch = patch.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
        self.image.paste(patch, (rect.x, rect.y))
    
    def fill_rect(self, rect: CellRect, color: Tuple[int, int, int], alpha: float):
        overlay = Image.new("RGBA", (rect.width, rect.height), tuple(color) + (round(alpha * 255),))
        self.image.alpha_composite(overlay, dest=(rect.x, rect.y))
    
    def to_array(self) -> np.ndarray:
        """(h, w, 4) uint8 copy of the raster"""
        return np.array(self.image)
    
    def save(self, path: Union[str, Path]) -> Path:
        """Write the raster as PNG"""
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(out_path, format="PNG")
        return out_path
