"""Monte Carlo path tracer for scenes made of spheres."""

from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.interval import Interval
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.material import Material
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.pass_through import PassThrough
from pathtracer.camera.camera import Camera
from pathtracer.renderer.options import RenderOptions, QUALITY_LEVELS
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.image_writer import save_image
from pathtracer.errors import PathTracerError, ConfigurationError, DegenerateVectorError

__version__ = "0.1.0"

__all__ = [
    "Vector3", "Ray", "Interval",
    "HitRecord", "Hittable", "Sphere", "HittableList",
    "Material", "Lambertian", "Metal", "Dielectric", "PassThrough",
    "Camera", "RenderOptions", "QUALITY_LEVELS", "Renderer", "save_image",
    "PathTracerError", "ConfigurationError", "DegenerateVectorError",
]
