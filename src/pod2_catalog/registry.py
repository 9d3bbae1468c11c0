"""
Tileset Registry - owns the tileset list, per-tileset weights and the derived catalog
"""

import logging
from typing import Dict, List, Optional, Union
from uuid import UUID

from ..pod1_tilesets.image_source import ImageSource
from ..pod1_tilesets.schemas import RGBColor, TileSource
from ..pod1_tilesets.validators import parse_hex_color, validate_weight
from ..common.config import settings
from .extractor import TileExtractor
from .schemas import TileCatalog

logger = logging.getLogger(__name__)


class TilesetRegistry:
    """
    Coordinating context for uploaded tilesets
    The catalog is rebuilt from scratch whenever the tileset list or the
    excluded color changes
    """
    
    def __init__(
        self,
        extractor: Optional[TileExtractor] = None,
        exclude_color: Union[str, RGBColor, None] = None
    ):
        """
        Initialize tileset registry
        
        Args:
            extractor: Tile extractor used for catalog rebuilds
            exclude_color: Initial excluded color
        """
        self.extractor = extractor or TileExtractor()
        self._sources: List[TileSource] = []
        self._weights: Dict[UUID, int] = {}
        self._exclude_color = parse_hex_color(exclude_color)
        self._catalog = self.extractor.extract([], self._exclude_color)
    
    @property
    def sources(self) -> List[TileSource]:
        return list(self._sources)
    
    @property
    def weights(self) -> Dict[UUID, int]:
        return dict(self._weights)
    
    @property
    def exclude_color(self) -> Optional[RGBColor]:
        return self._exclude_color
    
    @property
    def catalog(self) -> TileCatalog:
        return self._catalog
    
    def add_source(
        self,
        image: ImageSource,
        name: Optional[str] = None,
        weight: Optional[int] = None
    ) -> TileSource:
        """
        Register a tileset and rebuild the catalog
        
        Args:
            image: Decoded tileset image
            name: Optional display name
            weight: Sampling weight, defaults to settings.default_source_weight
            
        Returns:
            The new TileSource
        """
        weight = settings.default_source_weight if weight is None else validate_weight(weight)
        source = TileSource(image=image, name=name)
        
        self._sources.append(source)
        self._weights[source.source_id] = weight
        logger.info(f"Added tileset {name or source.source_id} ({source.width}x{source.height}, weight {weight})")
        
        self.rebuild()
        return source
    
    def remove_source(self, source_id: UUID) -> TileSource:
        """Drop a tileset, its weight entry and every tile derived from it"""
        source = self.get_source(source_id)
        self._sources.remove(source)
        self._weights.pop(source_id, None)
        logger.info(f"Removed tileset {source.name or source_id}")
        
        self.rebuild()
        return source
    
    def get_source(self, source_id: UUID) -> TileSource:
        for source in self._sources:
            if source.source_id == source_id:
                return source
        raise KeyError(f"Unknown tileset: {source_id}")
    
    def set_weight(self, source_id: UUID, weight: int):
        """Set the sampling weight of a tileset (0-100)"""
        self.get_source(source_id)
        self._weights[source_id] = validate_weight(weight)
        logger.debug(f"Weight of tileset {source_id} set to {weight}")
    
    def get_weight(self, source_id: UUID) -> int:
        return self._weights.get(source_id, settings.default_source_weight)
    
    def set_exclude_color(self, color: Union[str, RGBColor, None]):
        """Change the excluded color and rebuild the catalog"""
        self._exclude_color = parse_hex_color(color)
        self.rebuild()
    
    def rebuild(self) -> TileCatalog:
        """Re-slice every tileset into a fresh catalog"""
        self._catalog = self.extractor.extract(self._sources, self._exclude_color)
        return self._catalog
