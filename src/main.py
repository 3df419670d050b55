# main.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from core.config import (BVH_SPLIT_AXIS, DEFAULT_EXECUTOR, DEFAULT_SEED,
                         DEFAULT_WORKERS, LOG_FILE, LOG_LEVEL, OUTPUT_DIR,
                         QUALITY_LEVELS)
from core.logging_config import setup_logging
from geometry.bvh import SPLIT_AXIS_POLICIES
from renderer.image_writer import save_image
from renderer.raytracer import EXECUTORS, RenderCancelled, Renderer
from scenes.builders import SCENES, build_scene

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a scene with the BVH path tracer")
    parser.add_argument("scene", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output image (.ppm or any format Pillow writes); "
                             "defaults to OUTPUT_DIR/<scene>.png")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--samples", type=int, default=None, help="Samples per pixel")
    parser.add_argument("--depth", type=int, default=None, help="Maximum bounces per path")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Quality preset for samples and bounces")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="Parallel scanline workers (1 renders inline)")
    parser.add_argument("--executor", choices=EXECUTORS, default=DEFAULT_EXECUTOR,
                        help="Worker pool type")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument("--bvh-axis", choices=SPLIT_AXIS_POLICIES, default=BVH_SPLIT_AXIS,
                        help="BVH split axis policy")
    parser.add_argument("--texture", type=str, default=None,
                        help="Image texture for the earth scene")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    parser.add_argument("--log-file", default=LOG_FILE, help="Optional rotating log file")
    return parser.parse_args(argv)

def run(args: argparse.Namespace) -> Path:
    world, camera = build_scene(args.scene, seed=args.seed, split_axis=args.bvh_axis,
                                texture=args.texture)

    # Quality preset first, explicit flags override it
    if args.quality is not None:
        quality = QUALITY_LEVELS[args.quality]
        camera.samples_per_pixel = quality["samples"]
        camera.max_depth = quality["bounces"]
    if args.width is not None:
        camera.image_width = args.width
    if args.samples is not None:
        camera.samples_per_pixel = args.samples
    if args.depth is not None:
        camera.max_depth = args.depth

    renderer = Renderer(camera, workers=args.workers, executor=args.executor, seed=args.seed)
    image = renderer.render(world)

    output = args.output if args.output is not None else OUTPUT_DIR / f"{args.scene}.png"
    return save_image(output, image)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        run(args)
    except (KeyboardInterrupt, RenderCancelled):
        logger.warning("Render interrupted")
        return 130
    except (ValueError, OSError) as e:
        logger.error("Render failed: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
