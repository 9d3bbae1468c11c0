"""
POD 3: Selection Module
Weighted and cycle-mode tile draws
"""

from .pool import TilePool
from .selector import WeightedTileSelector, WeightTable, weighted_choice

__all__ = [
    "TilePool",
    "WeightedTileSelector",
    "WeightTable",
    "weighted_choice"
]
