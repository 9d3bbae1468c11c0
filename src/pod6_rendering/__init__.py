"""
POD 6: Rendering Module
Draws generated patterns into raster sinks and exports them
"""

from .renderer import PatternRenderer
from .schemas import GenerationResult
from .sink import PillowRasterSink, RasterSink

__all__ = [
    "PatternRenderer",
    "GenerationResult",
    "PillowRasterSink",
    "RasterSink"
]
