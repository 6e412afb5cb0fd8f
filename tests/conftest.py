"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Allow running the tests from a checkout without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from pathtracer.core.vector import Vector3  # noqa: E402
from pathtracer.materials.lambertian import Lambertian  # noqa: E402
from pathtracer.geometry.sphere import Sphere  # noqa: E402
from pathtracer.renderer.options import RenderOptions  # noqa: E402


class FixedRandom:
    """Stands in for random.Random where a test needs one exact draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def rng():
    """A seeded generator so sampling tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere(gray):
    return Sphere(Vector3(0.0, 0.0, 0.0), 1.0, gray)


@pytest.fixture
def small_options():
    """A tiny looking-down-minus-z camera that renders in well under a second."""
    def make(**overrides):
        params = dict(
            aspect_ratio=1.0,
            image_width=8,
            samples_per_pixel=2,
            max_depth=5,
            vfov=90.0,
            lookfrom=(0.0, 0.0, 0.0),
            lookat=(0.0, 0.0, -1.0),
            vup=(0.0, 1.0, 0.0),
            sky_color=(0.5, 0.7, 1.0),
            defocus_angle=0.0,
            focus_dist=1.0,
        )
        params.update(overrides)
        return RenderOptions(**params)
    return make
