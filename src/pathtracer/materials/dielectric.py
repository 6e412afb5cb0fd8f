# materials/dielectric.py
import math
import random
from typing import Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract, reflectance
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Dielectric(Material):
    """
    Clear (or tinted) refractive material such as glass or water.

    Each interaction either reflects or refracts; the choice is random and
    weighted by Schlick's reflectance, with total internal reflection forcing
    a reflection.
    """
    def __init__(self, ref_idx: float, albedo: Vector3 = None):
        if not ref_idx > 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx
        self.albedo = albedo if albedo is not None else Vector3(1.0, 1.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vector3]:
        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.unit_vector()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0

        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Ray(rec.p, direction), self.albedo

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx}, albedo={self.albedo!r})"
