"""
Line-based scene file reader.

    cam  fx fy fz  ax ay az  ux uy uz  fov
    set  r g b  ambient
    mtl  r g b  [specular shininess]
    sph  cx cy cz  radius  mat
    pln  px py pz  nx ny nz  mat
    box  x0 y0 z0  x1 y1 z1  mat
    cyl  bx by bz  radius height  mat  [ax ay az]
    lgt  px py pz  r g b  intensity

Material indices are 1-based and refer to `mtl` lines in file order.
Blank lines and lines starting with '#' are ignored.
"""
from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from camera import Camera
from scene import Scene, Surface
from scene_settings import SceneSettings
from surfaces.cube import Cube
from surfaces.cylinder import Cylinder
from surfaces.plane import Plane
from surfaces.sphere import Sphere
from typings.light import Light
from typings.material import Material

# keyword -> allowed parameter counts
ARITY = {
    "cam": (10,),
    "set": (4,),
    "mtl": (3, 5),
    "sph": (5,),
    "pln": (7,),
    "box": (7,),
    "cyl": (6, 9),
    "lgt": (7,),
}


class SceneFileError(ValueError):
    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = "line {}: {}".format(line_number, message)
        super().__init__(message)
        self.line_number = line_number


def _material_at(materials: List[Material], index: float, line_number: int) -> Material:
    if not math.isfinite(index) or not float(index).is_integer():
        raise SceneFileError("material index {} is not a whole number".format(index), line_number)
    mat_idx = int(index)
    if not 1 <= mat_idx <= len(materials):
        raise SceneFileError(
            "material index {} out of range (1..{})".format(mat_idx, len(materials)), line_number
        )
    return materials[mat_idx - 1]


def parse_scene_text(text: str, aspect_ratio: float) -> Tuple[Scene, Camera, SceneSettings]:
    camera: Camera | None = None
    scene_settings = SceneSettings()
    materials: List[Material] = []
    surfaces: List[Surface] = []
    lights: List[Light] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        obj_type = parts[0]
        if obj_type not in ARITY:
            raise SceneFileError("Unknown object type: {}".format(obj_type), line_number)
        try:
            params = [float(p) for p in parts[1:]]
        except ValueError as exc:
            raise SceneFileError(str(exc), line_number) from exc
        if len(params) not in ARITY[obj_type]:
            raise SceneFileError(
                "'{}' expects {} values, got {}".format(
                    obj_type, " or ".join(str(n) for n in ARITY[obj_type]), len(params)
                ),
                line_number,
            )

        try:
            if obj_type == "cam":
                camera = Camera(
                    np.asarray(params[:3], dtype=float),
                    np.asarray(params[3:6], dtype=float),
                    np.asarray(params[6:9], dtype=float),
                    params[9],
                    aspect_ratio,
                )
            elif obj_type == "set":
                scene_settings = SceneSettings(np.asarray(params[:3], dtype=float), params[3])
            elif obj_type == "mtl":
                materials.append(Material(np.asarray(params[:3], dtype=float), *params[3:5]))
            elif obj_type == "sph":
                material = _material_at(materials, params[4], line_number)
                surfaces.append(Sphere(np.asarray(params[:3], dtype=float), params[3], material))
            elif obj_type == "pln":
                material = _material_at(materials, params[6], line_number)
                surfaces.append(
                    Plane(np.asarray(params[:3], dtype=float), np.asarray(params[3:6], dtype=float), material)
                )
            elif obj_type == "box":
                material = _material_at(materials, params[6], line_number)
                surfaces.append(
                    Cube(np.asarray(params[:3], dtype=float), np.asarray(params[3:6], dtype=float), material)
                )
            elif obj_type == "cyl":
                material = _material_at(materials, params[5], line_number)
                cylinder_args = [np.asarray(params[:3], dtype=float), params[3], params[4], material]
                if len(params) == 9:
                    cylinder_args.append(np.asarray(params[6:9], dtype=float))
                surfaces.append(Cylinder(*cylinder_args))
            elif obj_type == "lgt":
                lights.append(
                    Light(np.asarray(params[:3], dtype=float), params[6], np.asarray(params[3:6], dtype=float))
                )
        except SceneFileError:
            raise
        except ValueError as exc:
            # degenerate geometry and bad vectors, reported with their location
            raise SceneFileError(str(exc), line_number) from exc

    if camera is None:
        raise SceneFileError("Scene file is missing a camera ('cam' line)")
    return Scene(surfaces, lights), camera, scene_settings


def parse_scene_file(file_path: str, aspect_ratio: float) -> Tuple[Scene, Camera, SceneSettings]:
    with open(file_path, 'r') as f:
        return parse_scene_text(f.read(), aspect_ratio)
