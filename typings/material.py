from __future__ import annotations

from typing import Dict, Tuple

import numpy as np

from utils.vector_operations import as_vector

PRESET_ALBEDOS: Dict[str, Tuple[float, float, float]] = {
    "red": (0.8, 0.2, 0.2),
    "green": (0.2, 0.8, 0.2),
    "blue": (0.2, 0.2, 0.8),
    "white": (0.8, 0.8, 0.8),
    "gray": (0.5, 0.5, 0.5),
}


class Material:
    def __init__(
        self,
        albedo: np.ndarray,
        specular: float = 0.0,
        shininess: float = 1.0,
    ) -> None:
        # specular and shininess are carried with the material but not used by Lambertian shading.
        self.albedo: np.ndarray = as_vector(albedo)
        self.specular: float = float(specular)
        self.shininess: float = float(shininess)

    @classmethod
    def preset(cls, name: str) -> "Material":
        try:
            albedo = PRESET_ALBEDOS[name]
        except KeyError:
            raise ValueError("Unknown material preset: {}".format(name)) from None
        return cls(np.asarray(albedo, dtype=float))

    def __repr__(self) -> str:
        return f"Material(albedo={self.albedo.tolist()}, specular={self.specular}, shininess={self.shininess})"
