"""
Unit tests for Pattern Rendering (POD6)
"""

import random

import numpy as np
import pytest
from PIL import Image

from src.pod1_tilesets import ArrayImageSource, TileSource
from src.pod2_catalog import Tile, TileCatalog, TileExtractor, TilesetRegistry
from src.pod3_selection import TilePool
from src.pod4_coherence import GenerationParameters
from src.pod5_glitch import CellRect
from src.pod6_rendering import PatternRenderer, PillowRasterSink

from tests.helpers import solid_tileset


class TestPatternRenderer:
    """Test Pattern Renderer functionality"""
    
    @pytest.fixture
    def renderer(self):
        return PatternRenderer()
    
    def test_grid_size_for_canvas(self, renderer):
        assert renderer.grid_size_for_canvas(100, 50, 1, 8) == (6, 12)
        assert renderer.grid_size_for_canvas(100, 50, 2, 8) == (3, 6)
        assert renderer.grid_size_for_canvas(7, 7, 1, 8) == (0, 0)
    
    def test_two_tile_end_to_end(self, renderer, recording_sink, rng):
        """Test a 16x8 tileset on a 1x2 grid with no chaos draws exactly two tiles"""
        source = TileSource(image=ArrayImageSource(solid_tileset(2, 1)))
        catalog = TileExtractor().extract([source])
        params = GenerationParameters(chaos=0, coherence=70, normalize=30)
        
        result = renderer.render(catalog, [source], params, recording_sink, (1, 2), rng=rng)
        
        tiles = recording_sink.of_kind("tile")
        assert len(tiles) == 2
        assert recording_sink.of_kind("fill") == []
        assert all(call[1] == source.source_id and call[4] is False for call in tiles)
        assert [call[3] for call in tiles] == [
            CellRect(x=0, y=0, width=8, height=8),
            CellRect(x=8, y=0, width=8, height=8)
        ]
        assert result.blit_count == 2
        assert result.glitch_count == 0
    
    def test_operations_per_cell(self, renderer, recording_sink, make_source):
        """Test each cell gets one base blit and at most one glitch operation"""
        source = make_source(4, 4)
        catalog = TileExtractor().extract([source])
        params = GenerationParameters(chaos=100)
        
        result = renderer.render(catalog, [source], params, recording_sink, (6, 6), rng=random.Random(3))
        
        base = [c for c in recording_sink.of_kind("tile") if not c[4]]
        mirrored = [c for c in recording_sink.of_kind("tile") if c[4]]
        fills = recording_sink.of_kind("fill")
        assert len(base) == 36
        assert len(mirrored) + len(fills) == result.glitch_count
        assert result.glitch_count <= 36
        assert len(result.operations) == 36 + result.glitch_count
    
    def test_glitch_keeps_grid_identity(self, renderer, recording_sink, make_source):
        """Test mirrored blits reuse the placed tile"""
        source = make_source(3, 3)
        catalog = TileExtractor().extract([source])
        result = renderer.render(
            catalog, [source], GenerationParameters(chaos=100), recording_sink, (5, 5), rng=random.Random(9)
        )
        
        scaled = catalog.tile_size
        for call in recording_sink.of_kind("tile"):
            rect = call[3]
            assert result.grid.get(rect.y // scaled, rect.x // scaled) == call[2]
    
    def test_scale_enlarges_cells(self, renderer, recording_sink, make_source, rng):
        source = make_source(2, 2)
        catalog = TileExtractor().extract([source])
        renderer.render(catalog, [source], GenerationParameters(chaos=0, scale=3), recording_sink, (2, 2), rng=rng)
        
        rects = [call[3] for call in recording_sink.of_kind("tile")]
        assert rects[-1] == CellRect(x=24, y=24, width=24, height=24)
    
    def test_empty_input_is_noop(self, renderer, recording_sink, rng):
        result = renderer.render(TileCatalog(), [], GenerationParameters(), recording_sink, (4, 4), rng=rng)
        assert result.is_empty
        assert recording_sink.calls == []
    
    def test_pool_reset_after_source_removal(self, renderer, recording_sink, rng):
        """Test a carried cycle pool follows the catalog after a tileset is removed"""
        registry = TilesetRegistry()
        a = registry.add_source(ArrayImageSource(solid_tileset(3, 2)))
        registry.add_source(ArrayImageSource(solid_tileset(2, 1, base=30)))
        pool = TilePool(registry.catalog.tiles, rng)
        
        registry.remove_source(a.source_id)
        result = renderer.render(
            registry.catalog, registry.sources, GenerationParameters(chaos=0, cycle_mode=True),
            recording_sink, (3, 3), weights=registry.weights, rng=rng, pool=pool
        )
        
        assert result.grid.filled_count == 9
        assert all(tile in registry.catalog.tiles for _, _, tile in result.grid.placed())
        assert pool.matches(registry.catalog.tiles)
    
    def test_registry_driven_render(self, renderer, rng):
        registry = TilesetRegistry()
        registry.add_source(ArrayImageSource(solid_tileset(4, 2)), weight=70)
        registry.add_source(ArrayImageSource(solid_tileset(2, 2, base=30)), weight=30)
        sink = PillowRasterSink(64, 32)
        
        result = renderer.render(
            registry.catalog, registry.sources, GenerationParameters(chaos=0), sink,
            renderer.grid_size_for_canvas(64, 32, 1, 8), weights=registry.weights, rng=rng
        )
        assert result.grid_size == (4, 8)
        assert result.grid.filled_count == 32


class TestPillowRasterSink:
    """Test Pillow Raster Sink"""
    
    @pytest.fixture
    def source(self):
        pixels = np.zeros((8, 16, 3), dtype=np.uint8)
        pixels[:, :8] = (255, 0, 0)
        pixels[:, 8:] = (0, 0, 255)
        pixels[:, 0] = (0, 255, 0)  # left column of the first tile
        return TileSource(image=ArrayImageSource(pixels))
    
    def test_draw_tile_scaled(self, source):
        sink = PillowRasterSink(32, 16)
        sink.draw_tile(source, Tile(source_index=0, x=8, y=0), 8, CellRect(x=16, y=0, width=16, height=16))
        
        pixels = sink.to_array()
        assert tuple(pixels[15, 31]) == (0, 0, 255, 255)
        assert tuple(pixels[0, 0]) == (0, 0, 0, 0)
    
    def test_draw_tile_mirrored(self, source):
        sink = PillowRasterSink(8, 8)
        sink.draw_tile(source, Tile(source_index=0, x=0, y=0), 8, CellRect(x=0, y=0, width=8, height=8), mirrored=True)
        
        pixels = sink.to_array()
        assert tuple(pixels[0, 7]) == (0, 255, 0, 255)
        assert tuple(pixels[0, 0]) == (255, 0, 0, 255)
    
    def test_mirror_replaces_straight_blit(self, source):
        sink = PillowRasterSink(8, 8)
        rect = CellRect(x=0, y=0, width=8, height=8)
        tile = Tile(source_index=0, x=0, y=0)
        sink.draw_tile(source, tile, 8, rect)
        sink.draw_tile(source, tile, 8, rect, mirrored=True)
        
        assert tuple(sink.to_array()[0, 0]) == (255, 0, 0, 255)
    
    def test_fill_rect_translucent(self, source):
        sink = PillowRasterSink(8, 8)
        rect = CellRect(x=0, y=0, width=8, height=8)
        sink.draw_tile(source, Tile(source_index=0, x=8, y=0), 8, rect)
        sink.fill_rect(rect, (255, 255, 255), 0.3)
        
        r, g, b, a = sink.to_array()[4, 4]
        assert a == 255
        assert r == pytest.approx(0.3 * 255, abs=2)
        assert b == 255
    
    def test_clear(self, source):
        sink = PillowRasterSink(8, 8)
        sink.draw_tile(source, Tile(source_index=0, x=0, y=0), 8, CellRect(x=0, y=0, width=8, height=8))
        sink.clear()
        assert (sink.to_array() == 0).all()
    
    def test_export(self, tmp_path):
        sink = PillowRasterSink(16, 8)
        out = PatternRenderer.export(sink, output_dir=str(tmp_path))
        
        assert out.parent == tmp_path
        assert out.name.startswith("tile-glitch-")
        assert out.suffix == ".png"
        with Image.open(out) as img:
            assert img.size == (16, 8)
    
    def test_export_explicit_path(self, tmp_path):
        sink = PillowRasterSink(8, 8)
        out = PatternRenderer.export(sink, tmp_path / "nested" / "pattern.png")
        assert out.exists()
