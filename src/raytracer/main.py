# raytracer/main.py
import argparse
import logging
import random
import sys
import time
from typing import List, Optional
from raytracer import __version__
from raytracer.config import (DEFAULT_NX, DEFAULT_NY, DEFAULT_SAMPLES, DEFAULT_SCENE,
                              SCENE_NAMES, SHUTTER_DURATION, SHUTTER_OPEN, RenderSettings)
from raytracer.core.errors import BVHConstructionError
from raytracer.renderer.output import default_output_path, save_png
from raytracer.renderer.raytracer import Renderer
from raytracer.scenes import build_scene

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    # -h is the output height, so help only gets the long form.
    parser = argparse.ArgumentParser(
        prog="raytracer",
        description="Render a scene with a multi-threaded path tracer and write it as PNG.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-s", "--scene", choices=SCENE_NAMES, default=DEFAULT_SCENE,
                        help="scene to render (default: %(default)s)")
    parser.add_argument("-o", "--out", default=None,
                        help=f"output PNG path (default: {default_output_path()})")
    parser.add_argument("-x", "--nx", type=int, default=DEFAULT_NX,
                        help="render width in pixels (default: %(default)s)")
    parser.add_argument("-y", "--ny", type=int, default=DEFAULT_NY,
                        help="render height in pixels (default: %(default)s)")
    parser.add_argument("-p", "--samples-per-pixel", type=int, default=DEFAULT_SAMPLES,
                        help="samples per pixel (default: %(default)s)")
    parser.add_argument("-e", "--seed", type=int, default=None,
                        help="seed for scene generation and sampling (default: random)")
    parser.add_argument("-w", "--width", type=int, default=None,
                        help="output image width, resized from the render (default: nx)")
    parser.add_argument("-h", "--height", type=int, default=None,
                        help="output image height, resized from the render (default: ny)")
    parser.add_argument("-j", "--workers", type=int, default=None,
                        help="number of render threads (default: cpu count)")
    parser.add_argument("-b", "--bvh", action="store_true",
                        help="build a bounding volume hierarchy before rendering")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log progress and timings to stderr")
    return parser

def setup_logging(verbose: bool):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )

def run(settings: RenderSettings) -> str:
    """Build the scene, render it and write the PNG. Returns the output path."""
    total_start = time.perf_counter()
    rng = random.Random(settings.seed)

    start = time.perf_counter()
    world, camera = build_scene(settings.scene, settings.aspect, rng)
    if settings.use_bvh:
        try:
            world.build_bvh(SHUTTER_OPEN, SHUTTER_OPEN + SHUTTER_DURATION, rng)
        except BVHConstructionError as e:
            logger.warning("BVH unavailable for scene %r, using linear search: %s", settings.scene, e)
    logger.info("World created in %.2f seconds", time.perf_counter() - start)
    logger.info("Rendering nx=%d ny=%d ns=%d seed=%d scene=%s workers=%d",
                settings.nx, settings.ny, settings.samples, settings.seed,
                settings.scene, settings.workers)

    renderer = Renderer(settings.nx, settings.ny, settings.samples, settings.workers)
    pixels = renderer.render(world, camera, settings.seed)

    start = time.perf_counter()
    path = save_png(pixels, settings.out, settings.width, settings.height)
    logger.info("Image written in %.2f seconds", time.perf_counter() - start)
    logger.info("Total time %.2f seconds", time.perf_counter() - total_start)
    return path

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    seed = args.seed if args.seed is not None else random.SystemRandom().getrandbits(32)
    try:
        settings = RenderSettings.from_args(args, seed)
    except ValueError as e:
        parser.error(str(e))

    try:
        path = run(settings)
    except (OSError, ValueError) as e:
        logger.error("Render failed: %s", e)
        return 1
    print(path)
    return 0

if __name__ == "__main__":
    sys.exit(main())
