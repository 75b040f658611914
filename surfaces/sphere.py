from __future__ import annotations

import numpy as np

from typings.hit import Hit
from typings.material import Material
from typings.ray import Ray
from utils.vector_operations import EPSILON, DegenerateGeometryError, as_vector, vector_dot


class Sphere:
    def __init__(self, center: np.ndarray, radius: float, material: Material) -> None:
        if not radius > 0.0:
            raise DegenerateGeometryError("Sphere radius must be positive, got {}".format(radius))
        self.center: np.ndarray = as_vector(center)
        self.radius: float = float(radius)
        self.material: Material = material

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = float("inf")) -> Hit | None:
        ray_origin = ray.origin
        ray_direction = ray.direction

        origin_to_center = ray_origin - self.center
        quadratic_a = vector_dot(ray_direction, ray_direction)
        quadratic_b = 2.0 * vector_dot(origin_to_center, ray_direction)
        quadratic_c = vector_dot(origin_to_center, origin_to_center) - self.radius * self.radius

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant <= 0.0: # tangent rays count as misses
            return None

        sqrt_discriminant = float(np.sqrt(discriminant))
        inverse_2a = 1.0 / (2.0 * quadratic_a)

        t_near = (-quadratic_b - sqrt_discriminant) * inverse_2a
        t_far = (-quadratic_b + sqrt_discriminant) * inverse_2a
        if t_near > t_far:
            t_near, t_far = t_far, t_near

        if t_min <= t_near <= t_max:
            hit_distance = t_near
        elif t_min <= t_far <= t_max:
            hit_distance = t_far
        else:
            return None

        hit_point = ray.at(hit_distance)
        surface_normal = (hit_point - self.center) / self.radius
        if vector_dot(surface_normal, ray_direction) > 0.0:
            surface_normal = -surface_normal
        return Hit(t=float(hit_distance), point=hit_point, normal=surface_normal, material=self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center.tolist()}, radius={self.radius})"
