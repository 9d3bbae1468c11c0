"""
Schemas for tile extraction module
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, PrivateAttr, validator
from uuid import UUID

from ..common.config import settings
from ..pod1_tilesets.schemas import RGBColor


class Tile(BaseModel):
    """Tile-aligned 8x8 region of a tileset, addressed by offset"""
    source_index: int
    x: int
    y: int
    
    class Config:
        frozen = True
    
    @property
    def key(self) -> Tuple[int, int, int]:
        """Stable (source_index, x, y) key"""
        return (self.source_index, self.x, self.y)


class ExtractionConfig(BaseModel):
    """Configuration for slicing tilesets"""
    tile_size: int = Field(default=settings.tile_size, description="Tile edge in pixels")
    tolerance: int = Field(
        default=settings.exclude_tolerance,
        description="Per-channel distance below which a pixel matches the excluded color"
    )
    
    @validator('tile_size')
    def validate_tile_size(cls, v):
        """Validate tile size"""
        if v <= 0:
            raise ValueError(f"Tile size must be positive: {v}")
        return v
    
    @validator('tolerance')
    def validate_tolerance(cls, v):
        """Validate tolerance"""
        if not 0 <= v <= 256:
            raise ValueError(f"Tolerance must be between 0 and 256: {v}")
        return v


class TileCatalog(BaseModel):
    """Ordered tiles eligible for placement, across all tilesets"""
    tiles: List[Tile] = Field(default_factory=list)
    source_ids: List[UUID] = Field(default_factory=list)  # indexed by Tile.source_index
    source_sizes: List[Tuple[int, int]] = Field(default_factory=list)  # (width, height)
    tile_size: int = settings.tile_size
    exclude_color: Optional[RGBColor] = None
    created_at: datetime = Field(default_factory=datetime.now)
    
    _positions: Optional[Dict[Tuple[int, int, int], int]] = PrivateAttr(default=None)
    
    def __len__(self) -> int:
        return len(self.tiles)
    
    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]
    
    @property
    def is_empty(self) -> bool:
        return not self.tiles
    
    def index_of(self, tile: Tile) -> Optional[int]:
        """Position of the first catalog entry matching the tile, if any"""
        if self._positions is None:
            positions = {}
            for i, t in enumerate(self.tiles):
                positions.setdefault(t.key, i)
            self._positions = positions
        return self._positions.get(tile.key)
    
    def tiles_per_row(self, source_index: int) -> int:
        """Whole tiles across one row of a tileset"""
        return self.source_sizes[source_index][0] // self.tile_size
    
    def source_id_for(self, tile: Tile) -> UUID:
        return self.source_ids[tile.source_index]
    
    def count_by_source(self) -> Dict[UUID, int]:
        """Number of catalog tiles contributed by each tileset"""
        counts = {source_id: 0 for source_id in self.source_ids}
        for tile in self.tiles:
            counts[self.source_ids[tile.source_index]] += 1
        return counts
