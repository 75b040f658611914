"""Unit tests for ray-sphere intersection.

Tests cover:
- Ray hitting the sphere from outside (front face)
- Rays missing, pointing away, or tangent to the sphere
- Ray starting inside the sphere (normal flipped toward the ray)
- t_min / t_max windows
- Construction-time validation
"""

import numpy as np
import pytest

from surfaces.sphere import Sphere
from typings.ray import Ray
from utils.vector_operations import DegenerateGeometryError


def make_ray(origin, direction) -> Ray:
    return Ray(origin=np.asarray(origin, dtype=float), direction=np.asarray(direction, dtype=float))


class TestSphereIntersection:
    def test_direct_hit(self, red):
        sphere = Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)
        hit = sphere.intersect(make_ray([0, 0, 0], [0, 0, -1]))
        assert hit is not None
        assert hit.t == pytest.approx(2.0)
        np.testing.assert_allclose(hit.point, [0.0, 0.0, -2.0], atol=1e-12)
        np.testing.assert_allclose(hit.normal, [0.0, 0.0, 1.0], atol=1e-12)
        assert hit.material is red

    def test_miss(self, red):
        sphere = Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)
        assert sphere.intersect(make_ray([5, 0, 0], [0, 0, -1])) is None

    def test_sphere_behind_ray(self, red):
        sphere = Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)
        assert sphere.intersect(make_ray([0, 0, 0], [0, 0, 1])) is None

    def test_tangent_ray_is_a_miss(self, red):
        """A zero discriminant is treated as no hit."""
        sphere = Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)
        assert sphere.intersect(make_ray([1, 0, 0], [0, 0, -1])) is None

    def test_ray_from_inside_hits_far_side(self, red):
        sphere = Sphere(np.array([0.0, 0.0, 0.0]), 1.0, red)
        hit = sphere.intersect(make_ray([0, 0, 0], [0, 0, 1]))
        assert hit is not None
        assert hit.t == pytest.approx(1.0)
        # outward normal is +z, flipped to face the incoming ray
        np.testing.assert_allclose(hit.normal, [0.0, 0.0, -1.0], atol=1e-12)

    def test_t_max_excludes_hit(self, red):
        sphere = Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)
        assert sphere.intersect(make_ray([0, 0, 0], [0, 0, -1]), t_max=1.5) is None

    def test_t_min_past_near_root_falls_back_to_far_root(self, red):
        sphere = Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)
        hit = sphere.intersect(make_ray([0, 0, 0], [0, 0, -1]), t_min=2.5)
        assert hit is not None
        assert hit.t == pytest.approx(4.0)
        np.testing.assert_allclose(hit.normal, [0.0, 0.0, 1.0], atol=1e-12)

    def test_hit_distance_from_outside_toward_center(self, red, rng):
        """A ray aimed at the center from outside hits at |O - C| - r."""
        for _ in range(100):
            center = rng.uniform(-3.0, 3.0, size=3)
            radius = rng.uniform(0.2, 2.0)
            direction = rng.normal(size=3)
            direction /= np.linalg.norm(direction)
            origin = center - direction * (radius + rng.uniform(0.5, 10.0))

            sphere = Sphere(center, radius, red)
            hit = sphere.intersect(make_ray(origin, center - origin))
            assert hit is not None
            assert hit.t == pytest.approx(np.linalg.norm(origin - center) - radius, rel=1e-9)
            expected_normal = (hit.point - center) / radius
            np.testing.assert_allclose(hit.normal, expected_normal, atol=1e-9)


class TestSphereConstruction:
    @pytest.mark.parametrize("radius", [0.0, -1.0, float("nan")])
    def test_non_positive_radius_raises(self, red, radius):
        with pytest.raises(DegenerateGeometryError):
            Sphere(np.zeros(3), radius, red)

    def test_center_is_immutable(self, red):
        sphere = Sphere(np.zeros(3), 1.0, red)
        with pytest.raises(ValueError):
            sphere.center[0] = 1.0
