"""
Tile Pool - cycle-mode draws without replacement
"""

import logging
import random
from typing import List, Sequence

from ..pod2_catalog.schemas import Tile

logger = logging.getLogger(__name__)


class TilePool:
    """
    Shuffled permutation of the catalog with a cursor
    Every tile is drawn exactly once per cycle; the order is reshuffled
    when the cycle is exhausted
    """
    
    def __init__(self, tiles: Sequence[Tile], rng: random.Random):
        if not tiles:
            raise ValueError("Cannot build a tile pool from an empty catalog")
        
        self.rng = rng
        self.reset(tiles)
    
    def reset(self, tiles: Sequence[Tile]):
        """Start a fresh shuffled cycle over a new set of tiles"""
        self.tiles: List[Tile] = list(tiles)
        self.shuffled_order: List[Tile] = list(tiles)
        self.cursor = 0
        self.cycles_completed = 0
        self.rng.shuffle(self.shuffled_order)
    
    def __len__(self) -> int:
        return len(self.shuffled_order)
    
    def matches(self, tiles: Sequence[Tile]) -> bool:
        """True when the pool was built from exactly these tiles"""
        return self.tiles == list(tiles)
    
    @property
    def remaining(self) -> int:
        """Tiles left before the next reshuffle"""
        return len(self.shuffled_order) - self.cursor
    
    def draw(self) -> Tile:
        """Next tile of the current cycle"""
        tile = self.shuffled_order[self.cursor]
        self.cursor += 1
        
        if self.cursor >= len(self.shuffled_order):
            self.cursor = 0
            self.cycles_completed += 1
            self.rng.shuffle(self.shuffled_order)
            logger.debug(f"Tile pool exhausted after cycle {self.cycles_completed}, reshuffled")
        
        return tile
