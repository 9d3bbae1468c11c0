"""
Schemas for rendering module
"""

from datetime import datetime
from typing import List, Tuple
from pydantic import BaseModel, Field

from ..pod4_coherence.schemas import GenerationParameters, PlacementGrid
from ..pod5_glitch.schemas import RasterOperation, TileBlit


class GenerationResult(BaseModel):
    """Result of one generation pass"""
    grid: PlacementGrid
    params: GenerationParameters
    operations: List[RasterOperation] = Field(default_factory=list)
    glitch_count: int = 0
    processing_time: float = 0.0  # seconds
    created_at: datetime = Field(default_factory=datetime.now)
    
    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.grid.shape
    
    @property
    def is_empty(self) -> bool:
        return not self.operations
    
    @property
    def blit_count(self) -> int:
        """Tile blits issued, mirrored glitch blits included"""
        return sum(1 for op in self.operations if isinstance(op, TileBlit))
