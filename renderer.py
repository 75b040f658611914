from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from camera import Camera
from scene import Scene
from scene_settings import SceneSettings
from typings.ray import Ray
from utils.vector_operations import EPSILON, clamp_color01, color_to_uint8, vector_dot

Pixel = Tuple[int, int, int]


@dataclass(slots=True)
class RenderStats:
    rays: int = 0
    hits: int = 0
    shadow_rays: int = 0


def shade(
    ray: Ray,
    scene: Scene,
    brightness: float,
    settings: SceneSettings,
    stats: RenderStats | None = None,
) -> np.ndarray:
    """
    Lambertian shading with hard shadows for a single primary ray.
    Returns the unclamped color: ambient + sum of unoccluded diffuse terms, or the background on a miss.
    """
    if stats is not None:
        stats.rays += 1

    best_hit = scene.nearest_hit(ray)
    if best_hit is None:
        return settings.background_color.copy()

    if stats is not None:
        stats.hits += 1

    albedo = best_hit.material.albedo
    hit_point = best_hit.point
    surface_normal = best_hit.normal

    # Ambient is not scaled by brightness
    color = settings.ambient_fraction * albedo

    for light in scene.lights:
        to_light = light.position - hit_point
        light_distance = float(np.linalg.norm(to_light))
        if light_distance < EPSILON: # light sits on the surface, direction undefined
            continue
        light_direction = to_light / light_distance

        # Diffuse component: kd * light_color * max(dot(N, L), 0)
        n_dot_l = vector_dot(surface_normal, light_direction)
        if n_dot_l <= 0.0:
            continue

        if stats is not None:
            stats.shadow_rays += 1
        if scene.is_occluded(hit_point, light, surface_normal):
            continue

        color = color + albedo * light.color * (light.intensity * n_dot_l * brightness)

    return color


def render_image(
    scene: Scene,
    camera: Camera,
    width: int,
    height: int,
    brightness: float = 1.0,
    settings: SceneSettings | None = None,
    stats: RenderStats | None = None,
) -> np.ndarray:
    """Render the scene into a (height, width, 3) float image, rows top to bottom, clamped to [0, 1]."""
    if width <= 0 or height <= 0:
        raise ValueError("Image dimensions must be positive, got {}x{}".format(width, height))
    if settings is None:
        settings = SceneSettings()

    image = np.zeros((height, width, 3), dtype=float)
    for y in range(height):
        for x in range(width):
            ray = camera.generate_ray(x, y, width, height)
            image[y, x, :] = shade(ray, scene, brightness, settings, stats)

    # Clamp only after every light is summed
    return clamp_color01(image)


def render(
    scene: Scene,
    camera: Camera,
    width: int,
    height: int,
    brightness: float = 1.0,
    settings: SceneSettings | None = None,
    stats: RenderStats | None = None,
) -> List[Pixel]:
    """Render to width * height 8-bit RGB triples in row-major order, top row first."""
    image = render_image(scene, camera, width, height, brightness, settings, stats)
    return [tuple(int(channel) for channel in pixel) for pixel in color_to_uint8(image).reshape(-1, 3)]
