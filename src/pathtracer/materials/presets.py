# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.pass_through import PassThrough

# Sphere factories taking flat coordinates, for building scenes by hand.

def lambertian_sphere(x: float, y: float, z: float, radius: float,
                      r: float, g: float, b: float) -> Sphere:
    return Sphere(Vector3(x, y, z), radius, Lambertian(Vector3(r, g, b)))

def metal_sphere(x: float, y: float, z: float, radius: float,
                 r: float, g: float, b: float, fuzz: float) -> Sphere:
    return Sphere(Vector3(x, y, z), radius, Metal(Vector3(r, g, b), fuzz))

def glass_sphere(x: float, y: float, z: float, radius: float,
                 r: float, g: float, b: float, ref_idx: float) -> Sphere:
    """A dielectric sphere tinted by (r, g, b)."""
    return Sphere(Vector3(x, y, z), radius, Dielectric(ref_idx, Vector3(r, g, b)))

def pass_through_sphere(x: float, y: float, z: float, radius: float) -> Sphere:
    return Sphere(Vector3(x, y, z), radius, PassThrough())
