from __future__ import annotations

import numpy as np

from utils.vector_operations import as_vector

WHITE = (1.0, 1.0, 1.0)


class Light:
    """Point light. No distance falloff: the contribution depends only on the angle and intensity."""

    def __init__(
        self,
        position: np.ndarray,
        intensity: float,
        color: np.ndarray = WHITE,
    ) -> None:
        self.position: np.ndarray = as_vector(position)
        self.intensity: float = float(intensity)
        self.color: np.ndarray = as_vector(color)

    @classmethod
    def white_light(cls, position: np.ndarray, intensity: float) -> "Light":
        return cls(position, intensity, WHITE)
