"""Smoke tests for the built-in demo scenes."""

import numpy as np
import pytest

from renderer import render
from scene_settings import SKY_BACKGROUND
from scenes import build_scene
from surfaces.cube import Cube
from surfaces.cylinder import Cylinder
from surfaces.plane import Plane
from surfaces.sphere import Sphere
from utils.vector_operations import color_to_uint8


class TestBuildScene:
    @pytest.mark.parametrize("number", [1, 2, 3, 4, 0, 99])
    def test_every_scene_renders(self, number):
        scene, camera, settings = build_scene(number, fov=45.0, aspect_ratio=16 / 12)
        pixels = render(scene, camera, 16, 12, 1.0, settings)
        assert len(pixels) == 16 * 12

    def test_scene_one_center_is_lit_sphere(self):
        scene, camera, settings = build_scene(1, aspect_ratio=1.0)
        np.testing.assert_allclose(settings.background_color, SKY_BACKGROUND)
        pixels = render(scene, camera, 9, 9, 1.0, settings)
        background = tuple(color_to_uint8(settings.background_color).tolist())
        assert pixels[4 * 9 + 4] != background
        assert pixels[0] == background

    def test_scene_three_has_every_primitive(self):
        scene, _, _ = build_scene(3)
        assert {type(s) for s in scene.surfaces} == {Plane, Sphere, Cylinder, Cube}

    def test_scene_four_shares_objects_but_moves_camera(self):
        scene_three, camera_three, _ = build_scene(3)
        scene_four, camera_four, _ = build_scene(4)
        assert [type(s) for s in scene_three.surfaces] == [type(s) for s in scene_four.surfaces]
        assert camera_three.look_from.tolist() != camera_four.look_from.tolist()

    def test_default_scene(self):
        scene, camera, _ = build_scene(0)
        assert len(scene.surfaces) == 1
        assert scene.lights[0].position.tolist() == [2.0, 2.0, 0.0]
        assert camera.look_from.tolist() == [0.0, 0.0, 0.0]
