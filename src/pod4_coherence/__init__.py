"""
POD 4: Coherence Module
Neighbor-aware tile placement over a destination grid
"""

from .engine import CoherenceEngine
from .schemas import GenerationParameters, PlacementGrid

__all__ = [
    "CoherenceEngine",
    "GenerationParameters",
    "PlacementGrid"
]
