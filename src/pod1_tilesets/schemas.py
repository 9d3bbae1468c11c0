"""
Schemas for tileset module
"""

from datetime import datetime
from typing import Optional, Tuple
from pydantic import BaseModel, Field, validator
from uuid import UUID, uuid4

import numpy as np

from .image_source import ImageSource


class RGBColor(BaseModel):
    """24-bit RGB color"""
    r: int
    g: int
    b: int
    
    @validator('r', 'g', 'b')
    def validate_channel(cls, v):
        """Validate channel range"""
        if not 0 <= v <= 255:
            raise ValueError(f"Color channel must be between 0 and 255: {v}")
        return v
    
    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)
    
    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class TileSource(BaseModel):
    """One uploaded tileset image"""
    source_id: UUID = Field(default_factory=uuid4)
    name: Optional[str] = None
    image: ImageSource
    added_at: datetime = Field(default_factory=datetime.now)
    
    class Config:
        arbitrary_types_allowed = True
    
    @property
    def width(self) -> int:
        return self.image.width
    
    @property
    def height(self) -> int:
        return self.image.height
    
    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels"""
        return (self.image.width, self.image.height)
    
    def sample(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        """Sample RGBA pixels of a region of the tileset"""
        return self.image.sample(x, y, width, height)
