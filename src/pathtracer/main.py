# main.py
import argparse
import logging
import sys
import time
from typing import List, Optional

import numpy as np

from pathtracer.core.vector import Vector3
from pathtracer.errors import PathTracerError
from pathtracer.geometry.world import HittableList
from pathtracer.logging_config import setup_logging
from pathtracer.materials.presets import (glass_sphere, lambertian_sphere,
                                          metal_sphere, pass_through_sphere)
from pathtracer.renderer.image_writer import save_image
from pathtracer.renderer.options import QUALITY_LEVELS, RenderOptions
from pathtracer.renderer.raytracer import Renderer

logger = logging.getLogger("pathtracer.main")


def create_world() -> HittableList:
    world = HittableList()

    # Ground
    world.add(lambertian_sphere(0.0, -100.5, -1.0, 100.0, 0.2, 0.6, 0.2))
    # Yellow-tinted glass
    world.add(glass_sphere(0.0, 0.0, 0.0, 0.5, 0.8, 0.8, 0.4, 2.7))
    # Red metal
    world.add(metal_sphere(0.0, 0.0, 1.5, 0.5, 0.7, 0.3, 0.3, 0.01))
    # Blue
    world.add(lambertian_sphere(-1.5, 0.0, 0.0, 0.5, 0.3, 0.3, 0.7))
    # Colored by ray direction
    world.add(pass_through_sphere(0.8, 0.0, -0.8, 0.3))

    for obj in world:
        logger.debug("Added %r", obj)
    return world


def default_options() -> RenderOptions:
    return RenderOptions(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=250,
        vfov=100.0,
        lookfrom=Vector3(1.0, 1.5, 0.0),
        lookat=Vector3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        sky_color=Vector3(0.4, 0.4, 0.9),
        defocus_angle=15.0,
        focus_dist=1.5,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render the demo sphere scene with a Monte Carlo path tracer.")
    parser.add_argument("-o", "--output", default="render.png",
                        help="output image path (default: %(default)s)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="apply a quality preset before the explicit overrides below")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--depth", type=int, help="maximum number of bounces")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible image")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--preview", action="store_true",
                        help="show the finished image in a window (requires pygame)")
    return parser


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    options = default_options()
    if args.quality:
        options = options.with_quality(args.quality)
    if args.width is not None:
        options.image_width = args.width
    if args.samples is not None:
        options.samples_per_pixel = args.samples
    if args.depth is not None:
        options.max_depth = args.depth
    return options.validate()


def preview(image: np.ndarray, title: str = "pathtracer"):
    """
    Display a rendered image until the window is closed or Escape is pressed.
    """
    import pygame

    pygame.init()
    try:
        height, width = image.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray indexes pixels as [x, y]
        surface = pygame.surfarray.make_surface(image.swapaxes(0, 1))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        options = options_from_args(args)
        renderer = Renderer(options, seed=args.seed)
        world = create_world()

        start = time.perf_counter()
        image = renderer.render(world)
        elapsed = time.perf_counter() - start
        logger.info("Render done! (took %.2fs)", elapsed)

        save_image(image, args.output)
    except PathTracerError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    except OSError as exc:
        logger.error("Could not write image: %s", exc)
        return 1

    if args.preview:
        preview(image)
    return 0


if __name__ == "__main__":
    sys.exit(main())
