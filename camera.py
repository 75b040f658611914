import math

import numpy as np

from typings.ray import Ray
from utils.vector_operations import (
    EPSILON,
    DegenerateGeometryError,
    as_vector,
    normalize_vector,
    vector_cross,
    vector_length,
)


class Camera:
    def __init__(
        self,
        look_from: np.ndarray,
        look_at: np.ndarray,
        up_vector: np.ndarray,
        fov: float,
        aspect_ratio: float,
    ) -> None:
        self.look_from = as_vector(look_from)
        self.look_at = as_vector(look_at)
        self.up_vector = as_vector(up_vector)
        self.fov = float(fov)
        self.aspect_ratio = float(aspect_ratio)

        if not 0.0 < self.fov < 180.0:
            raise DegenerateGeometryError("Field of view must be in (0, 180) degrees, got {}".format(self.fov))
        if not self.aspect_ratio > 0.0:
            raise DegenerateGeometryError("Aspect ratio must be positive, got {}".format(self.aspect_ratio))

        self._compute_basis()

    def _compute_basis(self) -> None:
        """Builds the unit forward, right and true_up axes and the half extents of the image plane at distance 1."""
        if vector_length(self.look_at - self.look_from) < EPSILON:
            raise DegenerateGeometryError("Camera look_from and look_at must differ")
        if vector_length(self.up_vector) < EPSILON:
            raise DegenerateGeometryError("Camera up vector must be non-zero")

        forward = normalize_vector(self.look_at - self.look_from) # view direction
        side = vector_cross(forward, self.up_vector)
        if vector_length(side) < EPSILON:
            raise DegenerateGeometryError("Camera up vector must not be parallel to the view direction")
        right = normalize_vector(side) # horizontal axis
        true_up = vector_cross(right, forward) # vertical axis

        self.forward: np.ndarray = forward
        self.right: np.ndarray = right
        self.true_up: np.ndarray = true_up
        self.half_height: float = math.tan(math.radians(self.fov) / 2.0)
        self.half_width: float = self.aspect_ratio * self.half_height

    def generate_ray(self, x: int, y: int, width: int, height: int) -> Ray:
        # pixel centre in normalized device coordinates; row 0 is the top of the image
        ndc_x = 2.0 * (float(x) + 0.5) / float(width) - 1.0
        ndc_y = 1.0 - 2.0 * (float(y) + 0.5) / float(height)

        # the image plane sits one unit along forward
        pixel_point = (
            self.look_from
            + self.forward
            + self.right * (ndc_x * self.half_width)
            + self.true_up * (ndc_y * self.half_height)
        )
        return Ray(origin=self.look_from, direction=pixel_point - self.look_from)
