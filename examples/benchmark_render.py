#!/usr/bin/env python3
"""Benchmark rendering time across image sizes.

Renders the single-sphere legacy scene at widths of 100, 200 and 400 pixels
(heights of 50, 100 and 200) and reports the time per frame and the primary
ray throughput.

Usage:
    python examples/benchmark_render.py [--sizes 100,200,400] [--samples 4] [--runs 3]
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import asdict, dataclass

from raytrace.core.renderer import Renderer, RenderSettings
from raytrace.scene.presets import create_legacy_scene

DEFAULT_SIZES = (100, 200, 400)


@dataclass
class BenchmarkResult:
    """Timing of one image size."""

    width: int
    height: int
    aa_samples: int
    best_time_s: float
    mean_time_s: float
    rays_per_second: float


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark rendering time across image sizes.")
    parser.add_argument(
        "--sizes",
        type=str,
        default=",".join(str(size) for size in DEFAULT_SIZES),
        help="Comma-separated image widths (default: 100,200,400)",
    )
    parser.add_argument("--samples", type=int, default=4, help="Samples per pixel (default: 4)")
    parser.add_argument("--runs", type=int, default=3, help="Timed runs per size (default: 3)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument("--json", type=str, default=None, help="Write results to a JSON file")
    return parser.parse_args(argv)


def benchmark_size(width: int, aa_samples: int, runs: int, seed: int) -> BenchmarkResult:
    """Render the legacy scene ``runs`` times at the given width."""
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    scene, camera = create_legacy_scene()
    world = scene.build()
    settings = RenderSettings(horizontal_pixels=width, aa_samples=aa_samples, seed=seed)

    times = []
    for _ in range(runs):
        renderer = Renderer(world, camera, settings)
        start = time.perf_counter()
        image = renderer.render()
        times.append(time.perf_counter() - start)

    best = min(times)
    total_rays = image.width * image.height * aa_samples
    return BenchmarkResult(
        width=image.width,
        height=image.height,
        aa_samples=aa_samples,
        best_time_s=best,
        mean_time_s=sum(times) / len(times),
        rays_per_second=total_rays / best if best > 0 else 0.0,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        sizes = [int(size) for size in args.sizes.split(",") if size.strip()]
        results = []
        print(f"{'Size':>10} {'Best (s)':>10} {'Mean (s)':>10} {'Rays/s':>12}")
        print("-" * 45)
        for width in sizes:
            result = benchmark_size(width, args.samples, args.runs, args.seed)
            results.append(result)
            print(
                f"{result.width:>4}x{result.height:<5} {result.best_time_s:>10.3f} "
                f"{result.mean_time_s:>10.3f} {result.rays_per_second:>12.0f}"
            )

        if args.json is not None:
            with open(args.json, "w", encoding="utf-8") as f:
                json.dump([asdict(result) for result in results], f, indent=2)
            print(f"Results saved to: {args.json}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
