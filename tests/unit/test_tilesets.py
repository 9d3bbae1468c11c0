"""
Unit tests for Tilesets (POD1)
"""

import numpy as np
import pytest
from PIL import Image

from src.pod1_tilesets import ArrayImageSource, RGBColor, TileSource, load_image_source, parse_hex_color
from src.pod1_tilesets.validators import validate_weight


class TestImageSources:
    """Test image source adapters"""
    
    def test_rgb_array_gets_opaque_alpha(self):
        """Test RGB arrays are widened to RGBA"""
        source = ArrayImageSource(np.zeros((16, 24, 3), dtype=np.uint8))
        assert source.width == 24
        assert source.height == 16
        
        region = source.sample(8, 0, 8, 8)
        assert region.shape == (8, 8, 4)
        assert (region[..., 3] == 255).all()
    
    def test_grayscale_array(self):
        """Test grayscale arrays are expanded to three channels"""
        source = ArrayImageSource(np.full((8, 8), 42, dtype=np.uint8))
        assert (source.sample(0, 0, 8, 8)[..., :3] == 42).all()
    
    def test_invalid_shape(self):
        """Test unsupported arrays are rejected"""
        with pytest.raises(ValueError):
            ArrayImageSource(np.zeros((8, 8, 2), dtype=np.uint8))
    
    def test_load_image_source(self, tmp_path):
        """Test decoding a tileset file with Pillow"""
        path = tmp_path / "tiles.png"
        Image.new("RGB", (16, 8), (10, 20, 30)).save(path)
        
        source = load_image_source(path)
        assert (source.width, source.height) == (16, 8)
        assert tuple(source.sample(0, 0, 1, 1)[0, 0]) == (10, 20, 30, 255)
    
    def test_load_missing_file(self, tmp_path):
        """Test missing tileset files"""
        with pytest.raises(FileNotFoundError):
            load_image_source(tmp_path / "missing.png")
    
    def test_tile_source_properties(self):
        """Test TileSource delegates to its image"""
        source = TileSource(image=ArrayImageSource(np.zeros((8, 16, 3), dtype=np.uint8)))
        assert source.size == (16, 8)
        assert source.sample(0, 0, 8, 8).shape == (8, 8, 4)


class TestColorParsing:
    """Test excluded color parsing"""
    
    def test_full_hex(self):
        assert parse_hex_color("#00ff00").as_tuple() == (0, 255, 0)
        assert parse_hex_color("FF8000").as_tuple() == (255, 128, 0)
    
    def test_shorthand_hex(self):
        assert parse_hex_color("#0f0").as_tuple() == (0, 255, 0)
    
    def test_no_color(self):
        assert parse_hex_color(None) is None
        assert parse_hex_color("") is None
        assert parse_hex_color("none") is None
    
    def test_passthrough(self):
        color = RGBColor(r=1, g=2, b=3)
        assert parse_hex_color(color) is color
    
    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            parse_hex_color("#12345")
        with pytest.raises(ValueError):
            parse_hex_color("#gggggg")
    
    def test_to_hex(self):
        assert RGBColor(r=0, g=255, b=16).to_hex() == "#00ff10"
    
    def test_invalid_channel(self):
        with pytest.raises(ValueError):
            RGBColor(r=256, g=0, b=0)


class TestWeightValidation:
    """Test tileset weight validation"""
    
    def test_valid_weights(self):
        assert validate_weight(0) == 0
        assert validate_weight(100) == 100
    
    def test_invalid_weights(self):
        with pytest.raises(ValueError):
            validate_weight(101)
        with pytest.raises(ValueError):
            validate_weight(-1)
        with pytest.raises(ValueError):
            validate_weight(True)
