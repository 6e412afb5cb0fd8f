"""End-to-end behaviour of the path tracing loop."""

import math

import numpy as np
import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.pass_through import PassThrough
from pathtracer.renderer.image_writer import load_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import QUANTIZE_SCALE


def quantized(value):
    return int(math.sqrt(value) * QUANTIZE_SCALE)


@pytest.fixture
def mixed_world():
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.2, 0.6, 0.2))))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Dielectric(1.5)))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.3)))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    return world


class TestRadiance:

    def test_background_gradient(self, small_options):
        renderer = Renderer(small_options(sky_color=(0.4, 0.4, 0.9)))
        up = renderer.background(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 3.0, 0.0)))
        down = renderer.background(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, -3.0, 0.0)))
        horizon = renderer.background(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)))
        assert tuple(up) == pytest.approx((0.4, 0.4, 0.9))
        assert tuple(down) == pytest.approx((1.0, 1.0, 1.0))
        assert tuple(horizon) == pytest.approx((0.7, 0.7, 0.95))

    def test_zero_depth_is_black(self, small_options):
        renderer = Renderer(small_options())
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert renderer.ray_color(ray, HittableList(), 0) == Vector3(0.0, 0.0, 0.0)

    def test_miss_returns_background(self, small_options):
        renderer = Renderer(small_options())
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert renderer.ray_color(ray, HittableList(), 5) == renderer.background(ray)

    def test_attenuation_compounds_along_path(self, small_options):
        renderer = Renderer(small_options())
        tint = Vector3(0.5, 0.25, 1.0)
        world = HittableList([Sphere(Vector3(0.0, 0.0, -3.0), 1.0, Dielectric(1.0, tint))])
        # Index 1.0 never bends the ray; reflection only happens at grazing angles.
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        color = renderer.ray_color(ray, world, 10)
        background = renderer.background(ray)
        assert tuple(color) == pytest.approx(tuple(background * tint * tint))

    def test_bounce_budget_exhausted_is_black(self, small_options):
        renderer = Renderer(small_options())
        world = HittableList([Sphere(Vector3(0.0, 0.0, -3.0), 1.0, PassThrough())])
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        # Entering and leaving the sphere takes both bounces
        assert renderer.ray_color(ray, world, 2) == Vector3(0.0, 0.0, 0.0)
        assert renderer.ray_color(ray, world, 3) != Vector3(0.0, 0.0, 0.0)

    def test_absorbed_path_is_black(self, small_options, monkeypatch):
        renderer = Renderer(small_options())
        metal = Metal(Vector3(1.0, 1.0, 1.0), 0.0)
        monkeypatch.setattr(metal, "scatter", lambda ray_in, rec, rng: None)
        world = HittableList([Sphere(Vector3(0.0, 0.0, -3.0), 1.0, metal)])
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert renderer.ray_color(ray, world, 50) == Vector3(0.0, 0.0, 0.0)


class TestRender:

    def test_shape_and_dtype(self, small_options, mixed_world):
        image = Renderer(small_options(image_width=12, aspect_ratio=1.5), seed=3).render(mixed_world)
        assert image.shape == (8, 12, 3)
        assert image.dtype == np.uint8

    def test_empty_scene_sky_gradient(self, small_options):
        # A one-pixel-wide, very tall view: the top row looks almost straight
        # up at the sky color, the bottom row almost straight down at white.
        options = small_options(image_width=1, aspect_ratio=0.1, vfov=170.0,
                                samples_per_pixel=1, sky_color=(0.4, 0.4, 0.9))
        image = Renderer(options, jitter=False).render(HittableList())
        assert image.shape == (10, 1, 3)
        top = image[0, 0].astype(int)
        bottom = image[-1, 0].astype(int)
        expected_sky = [quantized(0.4), quantized(0.4), quantized(0.9)]
        assert np.all(np.abs(top - expected_sky) <= 2)
        assert np.all(bottom >= 253)
        # Red grows steadily from the top row down to the bottom row
        reds = image[:, 0, 0].astype(int)
        assert np.all(np.diff(reds) >= 0)

    def test_zero_depth_renders_black(self, small_options, mixed_world):
        image = Renderer(small_options(max_depth=0), seed=1).render(mixed_world)
        assert not image.any()

    def test_same_seed_is_reproducible(self, small_options, mixed_world):
        options = small_options(defocus_angle=4.0, focus_dist=1.0)
        first = Renderer(options, seed=11)
        image_a = first.render(mixed_world)
        image_b = first.render(mixed_world)
        image_c = Renderer(options, seed=11).render(mixed_world)
        assert np.array_equal(image_a, image_b)
        assert np.array_equal(image_a, image_c)

    def test_iter_pixels_is_raster_order(self, small_options, mixed_world):
        renderer = Renderer(small_options(image_width=6, aspect_ratio=2.0), seed=5)
        image = renderer.render(mixed_world)
        pixels = list(renderer.iter_pixels(mixed_world))
        assert len(pixels) == 6 * 3
        assert pixels == [tuple(int(c) for c in px) for row in image for px in row]

    def test_pass_through_sphere_renders(self, small_options):
        world = HittableList([Sphere(Vector3(0.0, 0.0, -1.0), 0.5, PassThrough())])
        image = Renderer(small_options(), seed=2).render(world)
        assert image.dtype == np.uint8

    def test_render_to_file(self, small_options, mixed_world, tmp_path):
        renderer = Renderer(small_options(), seed=9)
        path = renderer.render_to_file(mixed_world, tmp_path / "out.png")
        assert np.array_equal(load_image(path), renderer.render(mixed_world))

    def test_scanline_progress_is_logged(self, small_options, caplog):
        renderer = Renderer(small_options(image_width=4, aspect_ratio=2.0))
        with caplog.at_level("INFO", logger="pathtracer"):
            renderer.render(HittableList())
        messages = [r.getMessage() for r in caplog.records]
        assert "Scanlines remaining: 2/2" in messages
        assert "Scanlines remaining: 1/2" in messages

    @pytest.mark.parametrize("overrides", [
        {"max_depth": 2.5},
        {"defocus_angle": math.nan},
    ])
    def test_malformed_options_fail_before_rendering(self, small_options, overrides):
        options = small_options(**overrides)
        with pytest.raises(ConfigurationError):
            Renderer(options, seed=1)
