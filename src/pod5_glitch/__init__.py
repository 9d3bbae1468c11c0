"""
POD 5: Glitch Module
Probabilistic visual corruption applied at draw time
"""

from .processor import GlitchProcessor
from .schemas import CellRect, ColorFill, GlitchEffect, RasterOperation, TileBlit

__all__ = [
    "GlitchProcessor",
    "CellRect",
    "ColorFill",
    "GlitchEffect",
    "RasterOperation",
    "TileBlit"
]
