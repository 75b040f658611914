from __future__ import annotations

from typing import Iterable, Tuple, Union

import numpy as np

from surfaces.cube import Cube
from surfaces.cylinder import Cylinder
from surfaces.plane import Plane
from surfaces.sphere import Sphere
from typings.hit import Hit
from typings.light import Light
from typings.ray import Ray
from utils.vector_operations import EPSILON

Surface = Union[Sphere, Cube, Plane, Cylinder]
SURFACE_TYPES = (Sphere, Cube, Plane, Cylinder)


class Scene:
    """
    Fixed collection of surfaces and point lights.
    Both are stored as tuples in insertion order and never change after construction,
    so every pixel can be shaded independently of every other.
    """

    def __init__(self, surfaces: Iterable[Surface] = (), lights: Iterable[Light] = ()) -> None:
        self.surfaces: Tuple[Surface, ...] = tuple(surfaces)
        self.lights: Tuple[Light, ...] = tuple(lights)
        for surface in self.surfaces:
            if not isinstance(surface, SURFACE_TYPES):
                raise TypeError("Unsupported surface type: {}".format(type(surface).__name__))
        for light in self.lights:
            if not isinstance(light, Light):
                raise TypeError("Expected a Light, got {}".format(type(light).__name__))

    def nearest_hit(self, ray: Ray, max_distance: float = float("inf")) -> Hit | None:
        """Closest hit across all surfaces. On equal t the surface added first wins."""
        best_hit: Hit | None = None
        for surface in self.surfaces:
            hit = surface.intersect(ray, EPSILON, max_distance)
            if hit is None:
                continue
            if best_hit is None or hit.t < best_hit.t:
                best_hit = hit
        return best_hit

    def is_occluded(self, point: np.ndarray, light: Light, normal: np.ndarray | None = None) -> bool:
        """Check if a shadow ray from point toward the light is blocked before reaching it."""
        shadow_origin = np.asarray(point, dtype=float)
        if normal is not None:
            shadow_origin = shadow_origin + np.asarray(normal, dtype=float) * EPSILON # to avoid shadow acne
        to_light = light.position - shadow_origin
        distance_to_light = float(np.linalg.norm(to_light))
        if distance_to_light < EPSILON: # we're at the light source
            return False
        shadow_ray = Ray(origin=shadow_origin, direction=to_light / distance_to_light)
        for surface in self.surfaces:
            hit = surface.intersect(shadow_ray, EPSILON, distance_to_light)
            if hit is not None and hit.t < distance_to_light:
                return True
        return False

    def __repr__(self) -> str:
        return f"Scene(surfaces={len(self.surfaces)}, lights={len(self.lights)})"
