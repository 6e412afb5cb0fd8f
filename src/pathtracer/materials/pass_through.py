# materials/pass_through.py
import random
from typing import Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class PassThrough(Material):
    """
    Debug material: the ray continues unchanged from the hit point and is
    tinted by its own direction vector read as an RGB color.

    Not physically based. Direction components can be negative or larger
    than one, so the resulting radiance is only meaningful after clamping.
    """

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        return Ray(rec.p, ray_in.direction), ray_in.direction

    def __repr__(self) -> str:
        return "PassThrough()"
