from __future__ import annotations

import numpy as np

EPSILON: float = 1e-5  # self-intersection bias and threshold for "parallel" tests


class DegenerateGeometryError(ValueError):
    """Raised when geometry cannot define a direction, normal or extent."""


def as_vector(v) -> np.ndarray:
    """Copies v into a read-only float array of shape (3,)."""
    vector_array = np.array(v, dtype=float)
    if vector_array.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {vector_array.shape}")
    if not np.all(np.isfinite(vector_array)):
        raise ValueError(f"Vector has non-finite components: {vector_array}")
    vector_array.setflags(write=False)
    return vector_array


def vector_length(v: np.ndarray) -> float:
    vector_array = np.asarray(v, dtype=float)
    return float(np.linalg.norm(vector_array))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    magnitude = np.linalg.norm(vector_array)
    if magnitude < EPSILON:
        raise DegenerateGeometryError("Cannot normalize near-zero vector")
    return vector_array / magnitude


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:  # right-handed: x cross y = z
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return np.cross(vector_a, vector_b)


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0], each channel independently."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def color_to_uint8(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB color array (clamped to [0, 1]) to 8-bit integer [0, 255]."""
    clamped_color = clamp_color01(color_rgb)
    return (clamped_color * 255.0 + 0.5).astype(np.uint8)  # round to nearest
