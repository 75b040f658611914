from __future__ import annotations

import numpy as np

from utils.vector_operations import as_vector

DEFAULT_BACKGROUND = (0.2, 0.3, 0.5)
SKY_BACKGROUND = (0.5, 0.7, 1.0)
AMBIENT_FRACTION = 0.1


class SceneSettings:
    def __init__(
        self,
        background_color: np.ndarray = DEFAULT_BACKGROUND,
        ambient_fraction: float = AMBIENT_FRACTION,
    ) -> None:
        self.background_color: np.ndarray = as_vector(background_color)
        self.ambient_fraction: float = float(ambient_fraction)
