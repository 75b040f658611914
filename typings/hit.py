from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from typings.material import Material


@dataclass(frozen=True, slots=True)
class Hit:
    t: float
    point: np.ndarray
    normal: np.ndarray # unit length, facing the incoming ray
    material: Material
