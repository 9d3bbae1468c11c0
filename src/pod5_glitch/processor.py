"""
Glitch Processor - draw-time corruption of placed tiles
"""

import logging
import random
from typing import List

from .schemas import CellRect, ColorFill, GlitchEffect, RasterOperation, TileBlit
from ..pod2_catalog.schemas import Tile

logger = logging.getLogger(__name__)


class GlitchProcessor:
    """
    Turns a placed tile into raster operations
    With chaos/2 percent probability one of three effect slots fires:
    a horizontal mirror, a translucent random-color overlay, or nothing.
    Effects never touch the catalog or the placement grid.
    """
    
    def __init__(self, overlay_alpha: float = 0.3):
        self.overlay_alpha = overlay_alpha
    
    def apply_glitch(
        self,
        tile: Tile,
        rect: CellRect,
        chaos: int,
        rng: random.Random
    ) -> List[RasterOperation]:
        """
        Glitch operations for one cell, drawn after its base blit
        
        Args:
            tile: Placed tile
            rect: Destination cell
            chaos: Chaos slider (0-100)
            rng: Random source
            
        Returns:
            Zero or one raster operation
        """
        if not rng.random() * 100 < chaos / 2:
            return []
        
        effect = GlitchEffect(rng.randrange(3))
        if effect is GlitchEffect.MIRROR:
            return [TileBlit(tile=tile, rect=rect, mirrored=True)]
        if effect is GlitchEffect.OVERLAY:
            color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
            return [ColorFill(rect=rect, color=color, alpha=self.overlay_alpha)]
        return []
    
    def process_cell(
        self,
        tile: Tile,
        rect: CellRect,
        chaos: int,
        rng: random.Random
    ) -> List[RasterOperation]:
        """Base blit for the cell followed by any glitch operation"""
        return [TileBlit(tile=tile, rect=rect)] + self.apply_glitch(tile, rect, chaos, rng)
