"""Built-in demo scenes, selected by number from the command line."""
from __future__ import annotations

from typing import Tuple

import numpy as np

from camera import Camera
from scene import Scene
from scene_settings import SKY_BACKGROUND, SceneSettings
from surfaces.cube import Cube
from surfaces.cylinder import Cylinder
from surfaces.plane import Plane
from surfaces.sphere import Sphere
from typings.light import Light
from typings.material import Material

UP = np.array([0.0, 1.0, 0.0])


def _camera(look_from, look_at, fov: float, aspect_ratio: float) -> Camera:
    return Camera(np.asarray(look_from, dtype=float), np.asarray(look_at, dtype=float), UP, fov, aspect_ratio)


def _primitives_on_floor():
    return [
        Plane.horizontal(-1.5, Material.preset("gray")),
        Sphere(np.array([-2.5, -0.7, -4.0]), 0.8, Material.preset("green")),
        Cylinder(np.array([0.0, -1.5, -4.5]), 0.6, 1.8, Material.preset("blue")),
        Cube(np.array([1.8, -1.5, -3.5]), np.array([3.2, -0.1, -2.1]), Material.preset("red")),
    ]


def build_scene(
    number: int,
    fov: float = 45.0,
    aspect_ratio: float = 1.0,
) -> Tuple[Scene, Camera, SceneSettings]:
    """
    1: green sphere, light from the front, extra bright
    2: red cube on a gray floor with a shadow, dimmer
    3: sphere, cylinder and cube on a floor
    4: scene 3 from a low side angle
    anything else: red sphere with a white light up and to the right
    Global brightness is applied by the renderer, not baked into the lights.
    """
    sky = SceneSettings(background_color=SKY_BACKGROUND)

    if number == 1:
        scene = Scene(
            [Sphere(np.array([0.0, 0.0, -3.0]), 1.2, Material.preset("green"))],
            [Light.white_light(np.array([0.0, 0.0, 1.0]), 2.0)],
        )
        return scene, _camera((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), fov, aspect_ratio), sky

    if number == 2:
        scene = Scene(
            [
                Plane.horizontal(-1.5, Material.preset("gray")),
                Cube(np.array([-0.5, -1.5, -3.7]), np.array([0.5, -0.5, -2.7]), Material.preset("red")),
            ],
            [Light.white_light(np.array([2.0, 3.0, -1.0]), 0.6)],
        )
        return scene, _camera((0.0, 0.5, 0.0), (0.0, -0.5, -3.0), fov, aspect_ratio), sky

    if number in (3, 4):
        scene = Scene(
            _primitives_on_floor(),
            [Light.white_light(np.array([2.0, 4.0, -1.0]), 0.8)],
        )
        look_from = (0.0, 1.0, 0.0) if number == 3 else (-3.0, 0.2, -2.0)
        return scene, _camera(look_from, (0.0, -0.5, -4.0), fov, aspect_ratio), sky

    scene = Scene(
        [Sphere(np.array([0.0, 0.0, -3.0]), 1.0, Material.preset("red"))],
        [Light.white_light(np.array([2.0, 2.0, 0.0]), 1.0)],
    )
    return scene, _camera((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), fov, aspect_ratio), SceneSettings()
