#!/usr/bin/env python3
"""Render the sphere scene.

This script demonstrates end-to-end rendering with the raytrace package. It
builds a scene (the default four-sphere scene, the single-sphere legacy scene
or a scene loaded from JSON), sets up the camera and renders with jittered
anti-aliasing.

Usage:
    python examples/render_spheres.py [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --samples SAMPLES   Anti-aliasing samples per pixel (default: 100)
    --max-depth DEPTH   Maximum ray bounces (default: 50)
    --seed SEED         Random seed for a reproducible image
    --scene FILE        Load the scene from a JSON file
    --legacy            Render the single-sphere scene with the fixed camera
    --normals           Shade surface normals instead of tracing light
    --output OUTPUT     Output file path, "-" for PPM on stdout (default: -)
    --quiet             Suppress progress output

Progress is printed to stderr so that stdout can carry the image.

Example:
    python examples/render_spheres.py --width 400 --samples 50 --seed 7 > spheres.ppm
    python examples/render_spheres.py --output spheres.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from raytrace.camera.pinhole import PinholeCamera, get_camera_info, setup_camera
from raytrace.core.integrator import MAX_DEPTH, NormalIntegrator
from raytrace.core.renderer import Renderer, RenderSettings
from raytrace.preview.export import save_image
from raytrace.scene.manager import SceneManager
from raytrace.scene.presets import create_default_scene, create_legacy_scene


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=float,
        default=200.0,
        help="Image width in pixels (default: 200)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Anti-aliasing samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum ray bounces (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: fresh entropy)",
    )
    scene_group = parser.add_mutually_exclusive_group()
    scene_group.add_argument(
        "--scene",
        type=str,
        default=None,
        help="Load the scene from a JSON file",
    )
    scene_group.add_argument(
        "--legacy",
        action="store_true",
        help="Render the single-sphere scene with the fixed-basis camera",
    )
    parser.add_argument(
        "--normals",
        action="store_true",
        help="Shade surface normals instead of tracing light",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="-",
        help='Output file path; "-" writes PPM to stdout (default: -)',
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def log(message: str, quiet: bool) -> None:
    if not quiet:
        print(message, file=sys.stderr, flush=True)


def render_spheres(args: argparse.Namespace) -> Path | None:
    """Render the selected scene and write it out.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Path to the saved image file, or None when the image went to stdout.
    """
    if args.legacy:
        scene, camera = create_legacy_scene()
    else:
        if args.scene is not None:
            scene = SceneManager.load(args.scene)
            log(f"Loaded scene from {args.scene}", args.quiet)
        else:
            scene, _ = create_default_scene()
        camera = setup_camera(scene.camera if scene.camera is not None else PinholeCamera())

    world = scene.build()
    settings = RenderSettings(
        horizontal_pixels=args.width,
        aa_samples=args.samples,
        max_depth=args.max_depth,
        seed=args.seed,
    )
    integrator = NormalIntegrator(world) if args.normals else None
    renderer = Renderer(world, camera, settings, integrator=integrator)

    width, height = renderer.dimensions
    log(
        f"Rendering {scene.get_sphere_count()} spheres at {width}x{height}, "
        f"{settings.aa_samples} samples per pixel...",
        args.quiet,
    )
    info = get_camera_info(camera)
    log(
        f"  Camera at {info['origin']}, image plane from {info['lower_left']} "
        f"spanning {info['horizontal']} x {info['vertical']}",
        args.quiet,
    )

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if args.quiet:
            return
        elapsed = time.time() - start_time
        progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
        rows_per_sec = rows_done / elapsed if elapsed > 0 else 0
        print(
            f"\r  Progress: {rows_done}/{total_rows} rows "
            f"({progress_pct:.1f}%) - {rows_per_sec:.2f} rows/s",
            end="",
            file=sys.stderr,
            flush=True,
        )

    image = renderer.render(callback=progress_callback)
    log("", args.quiet)  # Newline after progress

    output_file = None
    if args.output == "-":
        image.write_to(sys.stdout)
        sys.stdout.flush()
    else:
        output_file = save_image(image, args.output)
        log(f"Saved to: {output_file.absolute()}", args.quiet)

    log(f"Total time: {time.time() - start_time:.2f}s", args.quiet)
    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    try:
        render_spheres(args)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
