from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from utils.vector_operations import as_vector, normalize_vector


@dataclass(frozen=True, slots=True)
class Ray:
    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        # Directions are always stored unit length so that t is a world-space distance.
        object.__setattr__(self, "origin", as_vector(self.origin))
        object.__setattr__(self, "direction", as_vector(normalize_vector(self.direction)))

    def at(self, t: float) -> np.ndarray:
        return self.origin + t * self.direction
