from __future__ import annotations

import numpy as np

from typings.hit import Hit
from typings.material import Material
from typings.ray import Ray
from utils.vector_operations import EPSILON, as_vector, normalize_vector, vector_dot


class Plane:
    """Infinite plane through `point` with the given normal."""

    def __init__(self, point: np.ndarray, normal: np.ndarray, material: Material) -> None:
        self.point: np.ndarray = as_vector(point)
        self.normal: np.ndarray = as_vector(normalize_vector(normal))
        self.material: Material = material

    @classmethod
    def horizontal(cls, y: float, material: Material) -> "Plane":
        return cls(np.array([0.0, y, 0.0]), np.array([0.0, 1.0, 0.0]), material)

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = float("inf")) -> Hit | None:
        ray_direction = ray.direction

        direction_dot_normal = vector_dot(self.normal, ray_direction)
        if abs(direction_dot_normal) < EPSILON:
            return None

        hit_distance = vector_dot(self.point - ray.origin, self.normal) / direction_dot_normal
        if hit_distance < t_min or hit_distance > t_max:
            return None

        hit_point = ray.at(hit_distance)
        surface_normal = self.normal
        if direction_dot_normal > 0.0:
            surface_normal = -surface_normal
        return Hit(t=float(hit_distance), point=hit_point, normal=surface_normal, material=self.material)

    def __repr__(self) -> str:
        return f"Plane(point={self.point.tolist()}, normal={self.normal.tolist()})"
