# core/utils.py
import math
import random
from pathtracer.core.vector import Vector3

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_vector(rng: random.Random) -> Vector3:
    """
    Returns a vector with components uniform in [0, 1).
    """
    return Vector3(rng.random(), rng.random(), rng.random())

def random_vector_ranged(rng: random.Random, minimum: float, maximum: float) -> Vector3:
    """
    Returns a vector with components uniform in [minimum, maximum).
    """
    span = maximum - minimum
    return Vector3(minimum + span * rng.random(),
                   minimum + span * rng.random(),
                   minimum + span * rng.random())

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector_ranged(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # The origin itself can be drawn; it has no direction.
        if p.length_squared() > 0.0:
            return p.unit_vector()

def random_on_hemisphere(rng: random.Random, normal: Vector3) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around normal.
    """
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return on_unit_sphere.inverse()

def random_in_unit_disk(rng: random.Random) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(-1.0 + 2.0 * rng.random(), -1.0 + 2.0 * rng.random(), 0.0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.

    The result is split into the components perpendicular and parallel to n
    (Snell's law). The caller is responsible for handling total internal
    reflection before calling this.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def reflectance(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
