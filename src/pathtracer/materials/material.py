# materials/material.py
import random
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once attached to a surface; a hit record refers
    to the material of the surface that was hit.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
