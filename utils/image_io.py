from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

import numpy as np
from PIL import Image

PPM_MAX_VALUE = 255


def format_ppm(width: int, height: int, pixels: Sequence[Tuple[int, int, int]]) -> str:
    """Plain-text PPM (P3): header, then one "R G B" line per pixel in the given order."""
    if len(pixels) != width * height:
        raise ValueError(
            "Expected {} pixels for a {}x{} image, got {}".format(width * height, width, height, len(pixels))
        )
    lines = ["P3", "{} {}".format(width, height), str(PPM_MAX_VALUE)]
    lines.extend("{} {} {}".format(r, g, b) for r, g, b in pixels)
    return "\n".join(lines) + "\n"


def pixels_to_array(width: int, height: int, pixels: Sequence[Tuple[int, int, int]]) -> np.ndarray:
    return np.asarray(pixels, dtype=np.uint8).reshape(height, width, 3)


def save_image(width: int, height: int, pixels: Sequence[Tuple[int, int, int]], output_path: str) -> None:
    """Writes .ppm as plain-text P3; any other extension goes through Pillow."""
    path = Path(output_path)
    if path.suffix.lower() == ".ppm":
        path.write_text(format_ppm(width, height, pixels))
        return
    image = Image.fromarray(pixels_to_array(width, height, pixels))
    image.save(path)
