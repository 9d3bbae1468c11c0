"""
Weighted Tile Selector - draws catalog tiles proportionally to their tileset weight
"""

import bisect
import logging
import random
from itertools import accumulate
from typing import List, Mapping, Optional, Sequence, TypeVar
from uuid import UUID

from ..common.config import settings
from ..pod2_catalog.schemas import Tile, TileCatalog

logger = logging.getLogger(__name__)

T = TypeVar("T")


def weighted_choice(items: Sequence[T], weights: Sequence[float], rng: random.Random) -> T:
    """
    Draw one item with probability weight_i / sum(weights)
    
    Walks the items subtracting weights from a uniform draw in
    [0, total) until it drops to zero or below. Falls back to the last
    item when rounding exhausts the walk.
    """
    remaining = rng.random() * sum(weights)
    for item, weight in zip(items, weights):
        remaining -= weight
        if remaining <= 0:
            return item
    return items[-1]


class WeightTable:
    """Cumulative tile weights for one catalog / weight map pair"""
    
    def __init__(self, catalog: TileCatalog, weights: List[float]):
        self.catalog = catalog
        self.weights = weights
        self.cumulative = list(accumulate(weights))
        self.total = self.cumulative[-1] if self.cumulative else 0
    
    def draw(self, rng: random.Random) -> Tile:
        """
        Same outcome as the subtracting walk: the first tile whose
        cumulative weight reaches the uniform draw. A zero total draws
        uniformly instead of always returning the first tile.
        """
        if self.total <= 0:
            return self.catalog[rng.randrange(len(self.catalog))]
        
        r = rng.random() * self.total
        index = bisect.bisect_left(self.cumulative, r)
        return self.catalog[min(index, len(self.catalog) - 1)]


class WeightedTileSelector:
    """
    Selects tiles across tilesets, biased by per-tileset weights
    Tilesets absent from the weight map use the default weight
    """
    
    def __init__(self, default_weight: Optional[int] = None):
        """
        Initialize selector
        
        Args:
            default_weight: Weight for tilesets with no entry
        """
        self.default_weight = settings.default_source_weight if default_weight is None else default_weight
    
    def resolve_weight(self, source_id: UUID, weights: Mapping[UUID, int]) -> int:
        return weights.get(source_id, self.default_weight)
    
    def prepare(self, catalog: TileCatalog, weights: Mapping[UUID, int]) -> WeightTable:
        """
        Resolve every tile's weight once for repeated draws
        
        Args:
            catalog: Non-empty tile catalog
            weights: Tileset id to weight
        """
        per_source = [self.resolve_weight(source_id, weights) for source_id in catalog.source_ids]
        table = WeightTable(catalog, [per_source[tile.source_index] for tile in catalog.tiles])
        
        if table.total <= 0:
            logger.debug("All tileset weights are zero, falling back to uniform selection")
        return table
    
    def select(
        self,
        catalog: TileCatalog,
        weights: Mapping[UUID, int],
        rng: random.Random
    ) -> Tile:
        """Draw a single tile; the caller guards against an empty catalog"""
        return self.prepare(catalog, weights).draw(rng)
