"""Shared fixtures for the ray tracer tests."""

import numpy as np
import pytest

from camera import Camera
from scene import Scene
from surfaces.sphere import Sphere
from typings.light import Light
from typings.material import Material


@pytest.fixture
def red() -> Material:
    return Material.preset("red")


@pytest.fixture
def gray() -> Material:
    return Material.preset("gray")


@pytest.fixture
def forward_camera() -> Camera:
    """Camera at the origin looking down -Z, 45 degree vertical fov, square aspect."""
    return Camera(
        np.array([0.0, 0.0, 0.0]),
        np.array([0.0, 0.0, -1.0]),
        np.array([0.0, 1.0, 0.0]),
        45.0,
        1.0,
    )


@pytest.fixture
def single_sphere_scene(red) -> Scene:
    """Unit sphere at (0, 0, -3) lit by a white light at (2, 2, 0)."""
    return Scene(
        [Sphere(np.array([0.0, 0.0, -3.0]), 1.0, red)],
        [Light.white_light(np.array([2.0, 2.0, 0.0]), 1.0)],
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
