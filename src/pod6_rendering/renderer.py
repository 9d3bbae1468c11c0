"""
Pattern Renderer - drives placement, glitching and drawing for a generation pass
"""

import logging
import random
import time
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple, Union
from uuid import UUID

from tqdm import tqdm

from .schemas import GenerationResult
from .sink import PillowRasterSink, RasterSink
from ..common.config import settings
from ..common.randomness import make_rng
from ..pod1_tilesets.schemas import TileSource
from ..pod2_catalog.schemas import TileCatalog
from ..pod3_selection.pool import TilePool
from ..pod4_coherence.engine import CoherenceEngine
from ..pod4_coherence.schemas import GenerationParameters, PlacementGrid
from ..pod5_glitch.processor import GlitchProcessor
from ..pod5_glitch.schemas import CellRect, ColorFill, RasterOperation, TileBlit

logger = logging.getLogger(__name__)


class PatternRenderer:
    """
    Renders a full pattern into a raster sink
    Every cell gets one base blit plus at most one glitch operation
    """
    
    def __init__(
        self,
        engine: Optional[CoherenceEngine] = None,
        glitch: Optional[GlitchProcessor] = None,
        show_progress: bool = False
    ):
        """
        Initialize renderer
        
        Args:
            engine: Tile placement engine
            glitch: Glitch post-processor
            show_progress: Display a progress bar while drawing
        """
        self.engine = engine or CoherenceEngine()
        self.glitch = glitch or GlitchProcessor()
        self.show_progress = show_progress
    
    @staticmethod
    def grid_size_for_canvas(width: int, height: int, scale: int, tile_size: int) -> Tuple[int, int]:
        """(rows, cols) of whole scaled tiles fitting the canvas"""
        scaled = tile_size * scale
        return height // scaled, width // scaled
    
    def render(
        self,
        catalog: TileCatalog,
        sources: Sequence[TileSource],
        params: GenerationParameters,
        sink: RasterSink,
        grid_size: Tuple[int, int],
        weights: Optional[Mapping[UUID, int]] = None,
        rng: Optional[random.Random] = None,
        pool: Optional[TilePool] = None
    ) -> GenerationResult:
        """
        Generate and draw a pattern
        
        Args:
            catalog: Tile catalog built from sources
            sources: Tilesets, indexed like the catalog
            params: Generation parameters
            sink: Drawing surface
            grid_size: (rows, cols)
            weights: Tileset id to weight
            rng: Random source
            pool: Cycle-mode pool carried over from an earlier pass
            
        Returns:
            GenerationResult
        """
        start_time = time.time()
        grid = PlacementGrid.empty(*grid_size)
        
        if not sources or catalog.is_empty or grid.rows == 0 or grid.cols == 0:
            logger.info("No tiles available, skipping generation")
            return GenerationResult(grid=grid, params=params)
        
        rng = rng or make_rng(settings.random_seed)
        scaled = catalog.tile_size * params.scale
        operations = []
        glitch_count = 0
        
        sink.clear()
        placements = self.engine.place_cells(
            catalog, params, grid, weights=weights, rng=rng, pool=pool
        )
        
        with tqdm(total=grid.rows * grid.cols, desc="Generating", disable=not self.show_progress) as pbar:
            for row, col, tile in placements:
                rect = CellRect(x=col * scaled, y=row * scaled, width=scaled, height=scaled)
                cell_ops = self.glitch.process_cell(tile, rect, params.chaos, rng)
                glitch_count += len(cell_ops) - 1
                
                for op in cell_ops:
                    self._draw(sink, op, sources, catalog.tile_size)
                operations.extend(cell_ops)
                pbar.update(1)
        
        processing_time = time.time() - start_time
        result = GenerationResult(
            grid=grid,
            params=params,
            operations=operations,
            glitch_count=glitch_count,
            processing_time=processing_time
        )
        
        logger.info(
            f"Generated {grid.rows}x{grid.cols} pattern "
            f"({glitch_count} glitches) in {processing_time:.2f} seconds"
        )
        return result
    
    @staticmethod
    def _draw(sink: RasterSink, op: RasterOperation, sources: Sequence[TileSource], tile_size: int):
        if isinstance(op, TileBlit):
            sink.draw_tile(sources[op.tile.source_index], op.tile, tile_size, op.rect, mirrored=op.mirrored)
        elif isinstance(op, ColorFill):
            sink.fill_rect(op.rect, op.color, op.alpha)
    
    @staticmethod
    def export(
        sink: PillowRasterSink,
        path: Union[str, Path, None] = None,
        output_dir: Optional[str] = None
    ) -> Path:
        """
        Save the current raster as PNG
        
        Args:
            sink: Rendered raster
            path: Explicit output path
            output_dir: Directory for a timestamped file when no path is given
            
        Returns:
            Path written
        """
        if path is None:
            stamp = int(datetime.now().timestamp() * 1000)
            path = Path(output_dir or settings.output_dir) / f"tile-glitch-{stamp}.png"
        
        out_path = sink.save(path)
        logger.info(f"Exported pattern to {out_path}")
        return out_path
