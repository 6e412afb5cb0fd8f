# materials/metal.py
import random
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Metal(Material):
    """
    Metal material: mirror reflection blurred by a fuzz radius.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        if not fuzz >= 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Fuzzed below the surface: absorbed

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
