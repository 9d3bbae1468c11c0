"""
Tile Glitch command line interface

Example:
    tile-glitch --tileset nes_a.png --tileset nes_b.png --weight 80 --weight 20 \
        --chaos 30 --coherence 70 --normalize 60 --scale 2 --seed 7 --out pattern.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from .common.config import settings
from .common.log_setup import setup_logging
from .common.randomness import make_rng
from .pod1_tilesets.image_source import load_image_source
from .pod2_catalog.registry import TilesetRegistry
from .pod4_coherence.schemas import GenerationParameters
from .pod6_rendering.renderer import PatternRenderer
from .pod6_rendering.sink import PillowRasterSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate glitchy tile patterns from 8x8 tilesets")
    
    parser.add_argument(
        '--tileset',
        action='append',
        required=True,
        help='Tileset image path (repeatable)'
    )
    parser.add_argument(
        '--weight',
        action='append',
        type=int,
        default=[],
        help='Sampling weight 0-100 for each tileset, in order'
    )
    parser.add_argument('--chaos', type=int, default=settings.default_chaos)
    parser.add_argument('--coherence', type=int, default=settings.default_coherence)
    parser.add_argument('--normalize', type=int, default=settings.default_normalize)
    parser.add_argument('--scale', type=int, default=settings.default_scale, choices=[1, 2, 3, 4])
    parser.add_argument(
        '--exclude-color',
        type=str,
        default=None,
        help="Drop tiles containing this color, e.g. '#00ff00'"
    )
    parser.add_argument(
        '--cycle',
        action='store_true',
        default=settings.default_cycle_mode,
        help='Use every tile once before repeating'
    )
    parser.add_argument('--width', type=int, default=settings.canvas_width)
    parser.add_argument('--height', type=int, default=settings.canvas_height)
    parser.add_argument('--seed', type=int, default=settings.random_seed)
    parser.add_argument('--out', type=str, default=None, help='Output PNG path')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar')
    parser.add_argument('--log-level', type=str, default=settings.log_level)
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    
    if len(args.weight) > len(args.tileset):
        logger.error("More --weight values than --tileset images")
        return 2
    
    try:
        params = GenerationParameters(
            chaos=args.chaos,
            coherence=args.coherence,
            normalize=args.normalize,
            scale=args.scale,
            cycle_mode=args.cycle
        )
        registry = TilesetRegistry(exclude_color=args.exclude_color)
        for i, path in enumerate(args.tileset):
            weight = args.weight[i] if i < len(args.weight) else None
            registry.add_source(load_image_source(path), name=path, weight=weight)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid input: {e}")
        return 2
    
    renderer = PatternRenderer(show_progress=args.progress)
    grid_size = renderer.grid_size_for_canvas(
        args.width, args.height, params.scale, registry.catalog.tile_size
    )
    sink = PillowRasterSink(args.width, args.height)
    
    result = renderer.render(
        registry.catalog,
        registry.sources,
        params,
        sink,
        grid_size,
        weights=registry.weights,
        rng=make_rng(args.seed)
    )
    
    if result.is_empty:
        logger.error("No tiles to place; check the tilesets and excluded color")
        return 1
    
    renderer.export(sink, args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
