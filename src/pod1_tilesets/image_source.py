"""
Image sources - read-only pixel access over decoded tileset images
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


class ImageSource(ABC):
    """
    Decoded raster exposing its size and rectangular pixel sampling.
    Samples are always (h, w, 4) uint8 RGBA arrays.
    """
    
    @property
    @abstractmethod
    def width(self) -> int:
        """Image width in pixels"""
    
    @property
    @abstractmethod
    def height(self) -> int:
        """Image height in pixels"""
    
    @abstractmethod
    def sample(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        """Return the RGBA pixels of the region at (x, y)"""


class ArrayImageSource(ImageSource):
    """Image source backed by an in-memory numpy array"""
    
    def __init__(self, pixels: np.ndarray):
        """
        Args:
            pixels: (h, w), (h, w, 3) or (h, w, 4) array of 0-255 values
        """
        self._pixels = self._to_rgba(np.asarray(pixels))
        self._pixels.setflags(write=False)
    
    @staticmethod
    def _to_rgba(pixels: np.ndarray) -> np.ndarray:
        if pixels.ndim == 2:
            pixels = np.stack([pixels] * 3, axis=-1)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Unsupported pixel array shape: {pixels.shape}")
        
        pixels = pixels.astype(np.uint8)
        if pixels.shape[2] == 3:
            alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels, alpha], axis=-1)
        return pixels
    
    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])
    
    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])
    
    def sample(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        return self._pixels[y:y + height, x:x + width]


class PillowImageSource(ArrayImageSource):
    """Image source decoded through Pillow"""
    
    def __init__(self, image: Image.Image):
        super().__init__(np.asarray(image.convert("RGBA")))


def load_image_source(path: Union[str, Path]) -> PillowImageSource:
    """
    Decode an image file into an image source
    
    Args:
        path: Path to a PNG/GIF/BMP/... tileset image
        
    Returns:
        PillowImageSource for the file
    """
    image_path = Path(path)
    if not image_path.exists():
        raise FileNotFoundError(f"Tileset image not found: {image_path}")
    
    with Image.open(image_path) as img:
        source = PillowImageSource(img)
    
    logger.info(f"Loaded tileset {image_path.name} ({source.width}x{source.height})")
    return source
