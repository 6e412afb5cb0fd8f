import math

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError


def approx_vec(v, expected):
    return tuple(v) == pytest.approx(expected, abs=1e-9)


class TestCameraGeometry:

    def test_basis(self, small_options):
        camera = Camera(small_options())
        assert approx_vec(camera.w, (0.0, 0.0, 1.0))
        assert approx_vec(camera.u, (1.0, 0.0, 0.0))
        assert approx_vec(camera.v, (0.0, 1.0, 0.0))

    def test_basis_is_orthonormal_for_oblique_view(self, small_options):
        camera = Camera(small_options(lookfrom=(1.0, 1.5, 0.0), lookat=(0.0, 0.0, 0.0)))
        for a in (camera.u, camera.v, camera.w):
            assert a.length() == pytest.approx(1.0)
        assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
        assert camera.u.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
        assert camera.v.dot(camera.w) == pytest.approx(0.0, abs=1e-12)

    def test_image_height_truncates(self, small_options):
        camera = Camera(small_options(image_width=400, aspect_ratio=16.0 / 9.0))
        assert camera.image_height == 225
        camera = Camera(small_options(image_width=10, aspect_ratio=3.0))
        assert camera.image_height == 3

    def test_zero_rows_rejected(self, small_options):
        with pytest.raises(ConfigurationError, match="no rows"):
            Camera(small_options(image_width=2, aspect_ratio=10.0))

    def test_pixel_grid(self, small_options):
        camera = Camera(small_options(image_width=200, aspect_ratio=2.0))
        # 90 degree vfov at focus distance 1: a 4 x 2 viewport on z = -1
        assert approx_vec(camera.pixel_delta_u, (0.02, 0.0, 0.0))
        assert approx_vec(camera.pixel_delta_v, (0.0, -0.02, 0.0))
        assert approx_vec(camera.pixel00_loc, (-1.99, 0.99, -1.0))

    def test_focus_distance_scales_viewport(self, small_options):
        camera = Camera(small_options(image_width=200, aspect_ratio=2.0, focus_dist=3.0))
        assert approx_vec(camera.pixel00_loc, (-5.97, 2.97, -3.0))

    def test_invalid_options_fail_fast(self, small_options):
        with pytest.raises(ConfigurationError):
            Camera(small_options(lookat=(0.0, 0.0, 0.0)))


class TestCameraRays:

    def test_unjittered_ray_goes_through_pixel_center(self, small_options, rng):
        camera = Camera(small_options(image_width=200, aspect_ratio=2.0))
        ray = camera.get_ray(0, 0, rng, jitter=False)
        assert ray.origin == camera.center
        assert approx_vec(ray.direction, (-1.99, 0.99, -1.0))

        ray = camera.get_ray(199, 99, rng, jitter=False)
        assert approx_vec(ray.direction, (1.99, -0.99, -1.0))

    def test_jitter_stays_inside_pixel(self, small_options, rng):
        camera = Camera(small_options(image_width=200, aspect_ratio=2.0))
        center = camera.get_ray(10, 20, rng, jitter=False).direction
        for _ in range(200):
            offset = camera.get_ray(10, 20, rng).direction - center
            assert abs(offset.x) <= 0.01 + 1e-12
            assert abs(offset.y) <= 0.01 + 1e-12
            assert offset.z == pytest.approx(0.0)

    def test_pinhole_origin_is_camera_center(self, small_options, rng):
        camera = Camera(small_options(lookfrom=(1.0, 2.0, 3.0), lookat=(0.0, 0.0, 0.0)))
        for _ in range(20):
            assert camera.get_ray(3, 4, rng).origin == Vector3(1.0, 2.0, 3.0)

    def test_defocus_origins_lie_on_lens_disk(self, small_options, rng):
        options = small_options(defocus_angle=10.0, focus_dist=2.0)
        camera = Camera(options)
        radius = 2.0 * math.tan(math.radians(5.0))
        for _ in range(200):
            ray = camera.get_ray(4, 4, rng, jitter=False)
            offset = ray.origin - camera.center
            assert offset.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
            assert offset.length() < radius
            # Every lens sample converges on the same point of the focus plane
            assert approx_vec(ray.origin + ray.direction,
                              tuple(camera.pixel00_loc + camera.pixel_delta_u * 4 +
                                    camera.pixel_delta_v * 4))
