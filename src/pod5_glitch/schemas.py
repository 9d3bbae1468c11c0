"""
Schemas for glitch module
"""

from enum import IntEnum
from typing import Literal, Tuple, Union
from pydantic import BaseModel, Field, validator

from ..pod2_catalog.schemas import Tile


class GlitchEffect(IntEnum):
    """Effect slots, drawn uniformly once the chaos roll succeeds"""
    MIRROR = 0
    OVERLAY = 1
    NONE = 2


class CellRect(BaseModel):
    """Destination rectangle of a grid cell in raster pixels"""
    x: int
    y: int
    width: int
    height: int
    
    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom)"""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class TileBlit(BaseModel):
    """Draw a source tile region into a cell, optionally mirrored horizontally"""
    kind: Literal["blit"] = "blit"
    tile: Tile
    rect: CellRect
    mirrored: bool = False


class ColorFill(BaseModel):
    """Translucent color composited over a cell"""
    kind: Literal["fill"] = "fill"
    rect: CellRect
    color: Tuple[int, int, int]
    alpha: float = Field(default=0.3)
    
    @validator('alpha')
    def validate_alpha(cls, v):
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Alpha must be between 0 and 1: {v}")
        return v


RasterOperation = Union[TileBlit, ColorFill]
