"""
Configuration management for Tile Glitch
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""
    
    # Tiles
    tile_size: int = Field(
        default=8,
        description="Edge length of a source tile in pixels"
    )
    exclude_tolerance: int = Field(
        default=20,
        description="Per-channel tolerance for excluded color matching"
    )
    default_source_weight: int = Field(
        default=50,
        description="Sampling weight of a tileset with no explicit weight"
    )
    
    # Generation defaults
    default_chaos: int = Field(
        default=50,
        description="Glitch probability slider (0-100)"
    )
    default_coherence: int = Field(
        default=50,
        description="Neighbor connection slider (0-100)"
    )
    default_normalize: int = Field(
        default=50,
        description="Repetition vs variation slider (0-100)"
    )
    default_scale: int = Field(
        default=1,
        description="Tile upscaling factor (1-4)"
    )
    default_cycle_mode: bool = Field(
        default=False,
        description="Draw tiles without replacement when sampling independently"
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for reproducible patterns"
    )
    
    # Canvas / output
    canvas_width: int = Field(
        default=1024,
        description="Output raster width in pixels"
    )
    canvas_height: int = Field(
        default=768,
        description="Output raster height in pixels"
    )
    output_dir: str = Field(
        default="./output",
        description="Directory for exported patterns"
    )
    
    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path"
    )
    
    class Config:
        env_prefix = "GLITCH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Create global settings instance
settings = Settings()
