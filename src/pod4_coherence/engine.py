"""
Coherence Engine - neighbor-aware tile placement
"""

import logging
import random
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple
from uuid import UUID

from .schemas import GenerationParameters, Neighbor, PlacementGrid
from ..common.config import settings
from ..common.randomness import make_rng
from ..pod2_catalog.schemas import Tile, TileCatalog
from ..pod3_selection.pool import TilePool
from ..pod3_selection.selector import WeightedTileSelector, WeightTable, weighted_choice

logger = logging.getLogger(__name__)

# (row offset, col offset, influence)
NEIGHBOR_OFFSETS = (
    (0, -1, 1.0),
    (-1, 0, 1.0),
    (0, -2, 0.5),
    (-2, 0, 0.5),
)


class CoherenceEngine:
    """
    Places one tile per grid cell, row-major
    Each cell either derives its tile from an already placed neighbor
    (left/above) or samples independently, so coherence and normalize
    trade coherent regions against chaotic ones
    """
    
    def __init__(self, selector: Optional[WeightedTileSelector] = None):
        """
        Initialize coherence engine
        
        Args:
            selector: Selector for independent weighted draws
        """
        self.selector = selector or WeightedTileSelector()
    
    def generate(
        self,
        catalog: TileCatalog,
        params: GenerationParameters,
        grid_size: Tuple[int, int],
        weights: Optional[Mapping[UUID, int]] = None,
        rng: Optional[random.Random] = None,
        source_sizes: Optional[Sequence[Tuple[int, int]]] = None,
        pool: Optional[TilePool] = None
    ) -> PlacementGrid:
        """
        Run a full generation pass
        
        Args:
            catalog: Tile catalog
            params: Generation parameters
            grid_size: (rows, cols)
            weights: Tileset id to weight
            rng: Random source; seeded sources replay identical grids
            source_sizes: (width, height) per tileset, defaults to the catalog's
            pool: Cycle-mode pool carried over from an earlier pass
            
        Returns:
            PlacementGrid with a tile in every cell, or empty for an empty catalog
        """
        grid = PlacementGrid.empty(*grid_size)
        for _ in self.place_cells(catalog, params, grid, weights, rng, source_sizes, pool):
            pass
        return grid
    
    def place_cells(
        self,
        catalog: TileCatalog,
        params: GenerationParameters,
        grid: PlacementGrid,
        weights: Optional[Mapping[UUID, int]] = None,
        rng: Optional[random.Random] = None,
        source_sizes: Optional[Sequence[Tuple[int, int]]] = None,
        pool: Optional[TilePool] = None
    ) -> Iterator[Tuple[int, int, Tile]]:
        """
        Fill the grid cell by cell, yielding (row, col, tile) as each
        tile is recorded
        """
        if catalog.is_empty or grid.rows == 0 or grid.cols == 0:
            logger.info("Nothing to generate: empty catalog or grid")
            return
        
        rng = rng or make_rng(settings.random_seed)
        weights = weights or {}
        source_sizes = source_sizes or catalog.source_sizes
        table = None
        if params.cycle_mode:
            if pool is None:
                pool = TilePool(catalog.tiles, rng)
            elif not pool.matches(catalog.tiles):
                logger.debug("Tile pool built from a previous catalog, starting a fresh cycle")
                pool.reset(catalog.tiles)
        else:
            table = self.selector.prepare(catalog, weights)
        
        for row in range(grid.rows):
            for col in range(grid.cols):
                neighbors = self.gather_neighbors(grid, row, col)
                
                if neighbors and rng.random() * 100 < params.connection_chance:
                    tile = self._follow_neighbor(catalog, neighbors, params, source_sizes, rng)
                else:
                    tile = self._sample_independent(params, table, pool, rng)
                
                grid.place(row, col, tile)
                yield row, col, tile
    
    @staticmethod
    def gather_neighbors(grid: PlacementGrid, row: int, col: int) -> List[Neighbor]:
        """Placed tiles left and above the cell, nearer ones weighted higher"""
        neighbors = []
        for d_row, d_col, influence in NEIGHBOR_OFFSETS:
            tile = grid.get(row + d_row, col + d_col)
            if tile is not None:
                neighbors.append(Neighbor(tile=tile, weight=influence))
        return neighbors
    
    def _follow_neighbor(
        self,
        catalog: TileCatalog,
        neighbors: List[Neighbor],
        params: GenerationParameters,
        source_sizes: Sequence[Tuple[int, int]],
        rng: random.Random
    ) -> Tile:
        """
        Pick a neighbor by proximity and derive a tile near it in its
        tileset: an exact repeat, a nearby tile, or the neighbor itself
        """
        neighbor = weighted_choice(
            [n.tile for n in neighbors],
            [n.weight for n in neighbors],
            rng
        )
        
        index = catalog.index_of(neighbor)
        if index is None:
            return neighbor
        
        tiles_per_row = source_sizes[neighbor.source_index][0] // catalog.tile_size
        
        if rng.random() * 100 < params.normalize:
            offsets = (0, 0, 0, -1, 1, -tiles_per_row, tiles_per_row)
            offset = offsets[rng.randrange(len(offsets))]
        else:
            radius = params.variation_radius
            dy = rng.randint(-radius, radius)
            dx = rng.randint(-radius, radius)
            offset = dy * tiles_per_row + dx
        
        candidate = index + offset
        if 0 <= candidate < len(catalog) and catalog[candidate].source_index == neighbor.source_index:
            return catalog[candidate]
        return neighbor
    
    @staticmethod
    def _sample_independent(
        params: GenerationParameters,
        table: Optional[WeightTable],
        pool: Optional[TilePool],
        rng: random.Random
    ) -> Tile:
        if params.cycle_mode:
            return pool.draw()
        return table.draw(rng)
