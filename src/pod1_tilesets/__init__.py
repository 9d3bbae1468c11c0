"""
POD 1: Tilesets Module
Handles decoded tileset images and control surface inputs
"""

from .image_source import ImageSource, ArrayImageSource, PillowImageSource, load_image_source
from .schemas import RGBColor, TileSource
from .validators import parse_hex_color

__all__ = [
    "ImageSource",
    "ArrayImageSource",
    "PillowImageSource",
    "load_image_source",
    "RGBColor",
    "TileSource",
    "parse_hex_color"
]
