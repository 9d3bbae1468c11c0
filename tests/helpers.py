"""
Test helpers shared across unit tests
"""

import numpy as np

from src.pod6_rendering.sink import RasterSink

TILE = 8


def solid_tileset(cols: int, rows: int, base: int = 0) -> np.ndarray:
    """RGB array where every 8x8 tile is a distinct solid color"""
    pixels = np.zeros((rows * TILE, cols * TILE, 3), dtype=np.uint8)
    for r in range(rows):
        for c in range(cols):
            index = base + r * cols + c
            pixels[r * TILE:(r + 1) * TILE, c * TILE:(c + 1) * TILE] = (
                (index * 37) % 256, (index * 11) % 256, 200
            )
    return pixels


class RecordingSink(RasterSink):
    """Sink that records calls instead of drawing"""
    
    def __init__(self):
        self.calls = []
    
    def clear(self):
        self.calls.append(("clear",))
    
    def draw_tile(self, source, tile, tile_size, rect, mirrored=False):
        self.calls.append(("tile", source.source_id, tile, rect, mirrored))
    
    def fill_rect(self, rect, color, alpha):
        self.calls.append(("fill", rect, color, alpha))
    
    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]
