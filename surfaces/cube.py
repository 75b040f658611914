from __future__ import annotations

import numpy as np

from typings.hit import Hit
from typings.material import Material
from typings.ray import Ray
from utils.vector_operations import EPSILON, DegenerateGeometryError, as_vector


class Cube:
    """Axis-aligned box spanning min_corner..max_corner."""

    def __init__(self, min_corner: np.ndarray, max_corner: np.ndarray, material: Material) -> None:
        self.min_corner: np.ndarray = as_vector(min_corner)
        self.max_corner: np.ndarray = as_vector(max_corner)
        if np.any(self.min_corner >= self.max_corner):
            raise DegenerateGeometryError(
                "Cube min corner {} must be below max corner {} on every axis".format(
                    self.min_corner.tolist(), self.max_corner.tolist()
                )
            )
        self.material: Material = material

    @classmethod
    def unit(cls, material: Material) -> "Cube":
        return cls(np.full(3, -0.5), np.full(3, 0.5), material)

    @classmethod
    def centered(cls, center: np.ndarray, size: float, material: Material) -> "Cube":
        half_size = 0.5 * float(size)
        center = np.asarray(center, dtype=float)
        return cls(center - half_size, center + half_size, material)

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = float("inf")) -> Hit | None:
        ray_origin = ray.origin
        ray_direction = ray.direction
        box_min = self.min_corner
        box_max = self.max_corner
        t_entry = -float("inf")
        t_exit = float("inf")
        entry_axis = -1
        exit_axis = -1

        for axis in range(3):
            if ray_direction[axis] == 0.0:
                if ray_origin[axis] < box_min[axis] or ray_origin[axis] > box_max[axis]:
                    return None
                continue

            inverse_direction = 1.0 / float(ray_direction[axis])
            t_near = (float(box_min[axis]) - float(ray_origin[axis])) * inverse_direction
            t_far = (float(box_max[axis]) - float(ray_origin[axis])) * inverse_direction
            if t_near > t_far:
                t_near, t_far = t_far, t_near

            if t_near > t_entry:
                t_entry = t_near
                entry_axis = axis
            if t_far < t_exit:
                t_exit = t_far
                exit_axis = axis
            if t_exit < t_entry:
                return None

        if t_entry >= t_min:
            hit_distance, hit_axis = t_entry, entry_axis
        else:
            # origin inside the box (or entry behind t_min): leave through the exit face
            hit_distance, hit_axis = t_exit, exit_axis
        if hit_distance < t_min or hit_distance > t_max:
            return None

        hit_point = ray.at(hit_distance)
        surface_normal = np.zeros(3, dtype=float)
        surface_normal[hit_axis] = -1.0 if ray_direction[hit_axis] > 0.0 else 1.0
        return Hit(t=float(hit_distance), point=hit_point, normal=surface_normal, material=self.material)

    def __repr__(self) -> str:
        return f"Cube(min_corner={self.min_corner.tolist()}, max_corner={self.max_corner.tolist()})"
