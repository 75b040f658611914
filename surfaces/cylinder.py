from __future__ import annotations

from typing import List, Tuple

import numpy as np

from typings.hit import Hit
from typings.material import Material
from typings.ray import Ray
from utils.vector_operations import EPSILON, DegenerateGeometryError, as_vector, normalize_vector, vector_dot

Y_AXIS = (0.0, 1.0, 0.0)


class Cylinder:
    """
    Finite capped cylinder. The axis runs from base_center to base_center + height * axis.
    Hits are tested against the lateral surface and both end caps; the nearest one wins.
    """

    def __init__(
        self,
        base_center: np.ndarray,
        radius: float,
        height: float,
        material: Material,
        axis: np.ndarray = Y_AXIS,
    ) -> None:
        if not radius > 0.0:
            raise DegenerateGeometryError("Cylinder radius must be positive, got {}".format(radius))
        if not height > 0.0:
            raise DegenerateGeometryError("Cylinder height must be positive, got {}".format(height))
        self.base_center: np.ndarray = as_vector(base_center)
        self.radius: float = float(radius)
        self.height: float = float(height)
        self.axis: np.ndarray = as_vector(normalize_vector(axis))
        self.material: Material = material

    @property
    def top_center(self) -> np.ndarray:
        return self.base_center + self.height * self.axis

    def _lateral_candidates(self, ray: Ray, t_min: float, t_max: float) -> List[Tuple[float, np.ndarray]]:
        # Work in the plane perpendicular to the axis: |perp(O + tD - B)|^2 = r^2
        origin_offset = ray.origin - self.base_center
        direction_perp = ray.direction - vector_dot(ray.direction, self.axis) * self.axis
        offset_perp = origin_offset - vector_dot(origin_offset, self.axis) * self.axis

        quadratic_a = vector_dot(direction_perp, direction_perp)
        if quadratic_a < EPSILON * EPSILON: # ray runs along the axis, only the caps can be hit
            return []
        quadratic_b = 2.0 * vector_dot(offset_perp, direction_perp)
        quadratic_c = vector_dot(offset_perp, offset_perp) - self.radius * self.radius

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant <= 0.0:
            return []

        sqrt_discriminant = float(np.sqrt(discriminant))
        candidates: List[Tuple[float, np.ndarray]] = []
        for t in ((-quadratic_b - sqrt_discriminant) / (2.0 * quadratic_a),
                  (-quadratic_b + sqrt_discriminant) / (2.0 * quadratic_a)):
            if t < t_min or t > t_max:
                continue
            hit_point = ray.at(t)
            axial_position = vector_dot(hit_point - self.base_center, self.axis)
            if axial_position < 0.0 or axial_position > self.height:
                continue
            radial = hit_point - self.base_center - axial_position * self.axis
            candidates.append((t, radial / self.radius))
        return candidates

    def _cap_candidates(self, ray: Ray, t_min: float, t_max: float) -> List[Tuple[float, np.ndarray]]:
        direction_dot_axis = vector_dot(ray.direction, self.axis)
        if abs(direction_dot_axis) < EPSILON:
            return []

        candidates: List[Tuple[float, np.ndarray]] = []
        for cap_center, cap_normal in ((self.base_center, -self.axis), (self.top_center, self.axis)):
            t = vector_dot(cap_center - ray.origin, self.axis) / direction_dot_axis
            if t < t_min or t > t_max:
                continue
            from_center = ray.at(t) - cap_center
            if vector_dot(from_center, from_center) <= self.radius * self.radius:
                candidates.append((t, cap_normal))
        return candidates

    def intersect(self, ray: Ray, t_min: float = EPSILON, t_max: float = float("inf")) -> Hit | None:
        best: Tuple[float, np.ndarray] | None = None
        for candidate in self._lateral_candidates(ray, t_min, t_max) + self._cap_candidates(ray, t_min, t_max):
            if best is None or candidate[0] < best[0]:
                best = candidate
        if best is None:
            return None

        hit_distance, surface_normal = best
        if vector_dot(surface_normal, ray.direction) > 0.0:
            surface_normal = -surface_normal
        return Hit(t=float(hit_distance), point=ray.at(hit_distance), normal=surface_normal, material=self.material)

    def __repr__(self) -> str:
        return (
            f"Cylinder(base_center={self.base_center.tolist()}, radius={self.radius}, "
            f"height={self.height}, axis={self.axis.tolist()})"
        )
