import argparse
import sys
import time
from typing import Sequence

from renderer import RenderStats, render
from scene_parser import parse_scene_file
from scenes import build_scene
from utils.image_io import format_ppm, save_image


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='rt', description='CPU ray tracer that outputs PPM images')
    parser.add_argument('--width', type=int, default=800, help='Image width')
    parser.add_argument('--height', type=int, default=600, help='Image height')
    parser.add_argument('--scene', type=int, default=1, help='Built-in scene number (1-4, anything else: default scene)')
    parser.add_argument('--scene-file', type=str, default=None, help='Path to a scene file (overrides --scene)')
    parser.add_argument('--brightness', type=float, default=1.0, help='Multiplier applied to all diffuse lighting')
    parser.add_argument('--fov', type=float, default=45.0, help='Vertical field of view in degrees (built-in scenes only)')
    parser.add_argument('--output', type=str, default=None, help='Output image path (.ppm or any Pillow format); stdout if omitted')
    return parser


def log_phase(label: str, seconds: float) -> None:
    print(f"[phase] {label}: {seconds:.2f}s", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    aspect_ratio = args.width / args.height

    try:
        parse_start = time.perf_counter()
        if args.scene_file is not None:
            scene, camera, scene_settings = parse_scene_file(args.scene_file, aspect_ratio)
        else:
            scene, camera, scene_settings = build_scene(args.scene, args.fov, aspect_ratio)
        log_phase("build_scene", time.perf_counter() - parse_start)

        stats = RenderStats()
        render_start = time.perf_counter()
        pixels = render(scene, camera, args.width, args.height, args.brightness, scene_settings, stats)
        log_phase("render", time.perf_counter() - render_start)

        save_start = time.perf_counter()
        if args.output is None:
            sys.stdout.write(format_ppm(args.width, args.height, pixels))
        else:
            save_image(args.width, args.height, pixels, args.output)
        log_phase("save_image", time.perf_counter() - save_start)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(
        "[stats] rays={rays}, hits={hits}, shadow_rays={shadow_rays}".format(
            rays=stats.rays, hits=stats.hits, shadow_rays=stats.shadow_rays
        ),
        file=sys.stderr,
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
