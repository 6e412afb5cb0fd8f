# camera/camera.py
import logging
import math
import random
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk
from pathtracer.renderer.options import RenderOptions

logger = logging.getLogger(__name__)

class Camera:
    """
    Thin-lens camera derived from look-from/look-at/up, a vertical field of
    view and a focus plane.

    All viewing geometry is computed once in the constructor. Pixel (0, 0)
    is the top-left corner of the image; j grows downwards.
    """
    def __init__(self, options: RenderOptions):
        options.validate()
        self.image_width = options.image_width
        self.image_height = options.image_height
        self.center = options.lookfrom
        self.defocus_angle = options.defocus_angle
        self.focus_dist = options.focus_dist

        # Viewport dimensions on the focus plane
        theta = degrees_to_radians(options.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * options.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal camera basis; w points away from the scene
        self.w = (options.lookfrom - options.lookat).unit_vector()
        self.u = options.vup.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        # Edges of the viewport; v is flipped so rows run top to bottom
        viewport_u = self.u * viewport_width
        viewport_v = self.v.inverse() * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * options.focus_dist -
                               viewport_u / 2 -
                               viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = options.focus_dist * math.tan(degrees_to_radians(options.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

        logger.debug("Camera at %r, basis u=%r v=%r w=%r, %dx%d pixels",
                     self.center, self.u, self.v, self.w,
                     self.image_width, self.image_height)

    def get_ray(self, i: int, j: int, rng: random.Random, jitter: bool = True) -> Ray:
        """
        Generates a camera ray through pixel (i, j).

        The target is jittered uniformly within the pixel for antialiasing
        unless jitter is False. With a positive defocus angle the origin is
        sampled on the defocus disk.
        """
        pixel_center = (self.pixel00_loc +
                        self.pixel_delta_u * i +
                        self.pixel_delta_v * j)
        if jitter:
            pixel_sample = pixel_center + self.pixel_sample_square(rng)
        else:
            pixel_sample = pixel_center

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)

        return Ray(ray_origin, pixel_sample - ray_origin)

    def pixel_sample_square(self, rng: random.Random) -> Vector3:
        """Random offset within the footprint of one pixel around its center."""
        px = -0.5 + rng.random()
        py = -0.5 + rng.random()
        return self.pixel_delta_u * px + self.pixel_delta_v * py

    def defocus_disk_sample(self, rng: random.Random) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
