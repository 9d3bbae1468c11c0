"""
Schemas for coherence module
"""

from typing import Iterator, List, Optional, Tuple
from pydantic import BaseModel, Field, validator

from ..common.config import settings
from ..pod2_catalog.schemas import Tile


class GenerationParameters(BaseModel):
    """Control values read at the start of each generation pass"""
    chaos: int = Field(default=settings.default_chaos, description="Glitch probability (0-100)")
    coherence: int = Field(default=settings.default_coherence, description="Neighbor connection bias (0-100)")
    normalize: int = Field(default=settings.default_normalize, description="Repetition vs variation bias (0-100)")
    scale: int = Field(default=settings.default_scale, description="Tile upscaling factor")
    cycle_mode: bool = Field(default=settings.default_cycle_mode, description="Draw without replacement")
    
    @validator('chaos', 'coherence', 'normalize')
    def validate_percent(cls, v):
        """Validate slider range"""
        if not 0 <= v <= 100:
            raise ValueError(f"Value must be between 0 and 100: {v}")
        return v
    
    @validator('scale')
    def validate_scale(cls, v):
        """Validate scale"""
        if v not in (1, 2, 3, 4):
            raise ValueError(f"Scale must be 1, 2, 3 or 4: {v}")
        return v
    
    @property
    def connection_chance(self) -> float:
        """Percent chance of following a neighbor; may exceed 100"""
        return self.coherence + self.normalize * 0.3
    
    @property
    def variation_radius(self) -> int:
        """Offset radius of the wide variation branch"""
        return (100 - self.normalize) // 25 + 1


class Neighbor(BaseModel):
    """Already placed tile influencing the current cell"""
    tile: Tile
    weight: float


class PlacementGrid(BaseModel):
    """Tiles placed during one generation pass, row-major"""
    rows: int
    cols: int
    cells: List[List[Optional[Tile]]] = Field(default_factory=list)
    
    @validator('rows', 'cols')
    def validate_dimension(cls, v):
        if v < 0:
            raise ValueError(f"Grid dimension must not be negative: {v}")
        return v
    
    @classmethod
    def empty(cls, rows: int, cols: int) -> "PlacementGrid":
        return cls(rows=rows, cols=cols, cells=[[None] * cols for _ in range(rows)])
    
    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)
    
    def get(self, row: int, col: int) -> Optional[Tile]:
        """Tile at a cell, None when empty or outside the grid"""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.cells[row][col]
        return None
    
    def place(self, row: int, col: int, tile: Tile):
        self.cells[row][col] = tile
    
    def placed(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield (row, col, tile) for every filled cell"""
        for row, line in enumerate(self.cells):
            for col, tile in enumerate(line):
                if tile is not None:
                    yield row, col, tile
    
    @property
    def filled_count(self) -> int:
        return sum(1 for _ in self.placed())
