# renderer/raytracer.py
import logging
import math
import os
import random
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.image_writer import save_image
from pathtracer.renderer.options import RenderOptions
from pathtracer.renderer.tone_mapping import gamma_quantize

logger = logging.getLogger(__name__)

# Hits closer than this to the ray origin are ignored to avoid shadow acne.
T_MIN = 0.001
WHITE = Vector3(1.0, 1.0, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

class Renderer:
    """
    Monte Carlo path tracer over a Hittable scene.

    The renderer owns its random generator. Given a seed, every call to
    render() starts from that seed, so the same scene and options always
    produce the same image.
    """
    def __init__(self, options: RenderOptions, seed: Optional[int] = None,
                 jitter: bool = True):
        self.options = options.validate()
        self.camera = Camera(options)
        self.width = self.camera.image_width
        self.height = self.camera.image_height
        self.samples_per_pixel = options.samples_per_pixel
        self.max_depth = options.max_depth
        self.sky_color = options.sky_color
        self.jitter = jitter
        self.seed = seed
        self.rng = random.Random(seed)

    def reset_rng(self):
        """Restart the random sequence from the configured seed."""
        if self.seed is not None:
            self.rng = random.Random(self.seed)

    def background(self, ray: Ray) -> Vector3:
        """
        Sky gradient: white when looking straight down, sky_color straight up.
        """
        unit_direction = ray.direction.unit_vector()
        a = 0.5 * (unit_direction.y + 1.0)
        return WHITE * (1.0 - a) + self.sky_color * a

    def ray_color(self, ray: Ray, world: Hittable, depth: int) -> Vector3:
        """
        Incoming radiance along ray, following at most depth bounces.

        Attenuation is multiplied along the path; a path that is absorbed or
        runs out of bounces contributes black, a path that escapes picks up
        the background.
        """
        attenuation = WHITE
        ray_t = Interval(T_MIN, math.inf)
        for _ in range(depth):
            rec = world.hit(ray, ray_t)
            if rec is None:
                return attenuation * self.background(ray)

            result = rec.material.scatter(ray, rec, self.rng)
            if result is None:
                return BLACK
            ray, bounce_attenuation = result
            attenuation = attenuation * bounce_attenuation

        return BLACK

    def render_pixel(self, world: Hittable, i: int, j: int) -> Vector3:
        """Sum (not average) of samples_per_pixel radiance samples for pixel (i, j)."""
        pixel_color = BLACK
        for _ in range(self.samples_per_pixel):
            ray = self.camera.get_ray(i, j, self.rng, jitter=self.jitter)
            pixel_color = pixel_color + self.ray_color(ray, world, self.max_depth)
        return pixel_color

    def render_scanline(self, world: Hittable, j: int) -> np.ndarray:
        """
        Summed radiance for row j as a (width, 3) float array.
        """
        scanline = np.zeros((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            color = self.render_pixel(world, i, j)
            scanline[i] = (color.x, color.y, color.z)
        return scanline

    def iter_scanlines(self, world: Hittable) -> Iterator[np.ndarray]:
        """
        Yields each quantized (width, 3) uint8 row, top to bottom.
        """
        self.reset_rng()
        for j in range(self.height):
            logger.info("Scanlines remaining: %d/%d", self.height - j, self.height)
            yield gamma_quantize(self.render_scanline(world, j), self.samples_per_pixel)

    def iter_pixels(self, world: Hittable) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (r, g, b) byte triples in raster order.
        """
        for row in self.iter_scanlines(world):
            for r, g, b in row:
                yield int(r), int(g), int(b)

    def render(self, world: Hittable) -> np.ndarray:
        """
        Render the whole image as an (height, width, 3) uint8 array.
        """
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d, %d objects",
                    self.width, self.height, self.samples_per_pixel, self.max_depth,
                    len(world) if hasattr(world, '__len__') else 1)
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        for j, row in enumerate(self.iter_scanlines(world)):
            image[j] = row
        return image

    def render_to_file(self, world: Hittable, path: Union[str, os.PathLike]) -> str:
        """Render and write the image; returns the path written."""
        return save_image(self.render(world), path)
