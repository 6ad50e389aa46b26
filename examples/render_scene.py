#!/usr/bin/env python3
"""Render one of the preset scenes.

This script renders a preset world with the recursive Whitted integrator and
writes the result as a PNG or a plain-text PPM, chosen by the output suffix.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene NAME        Preset scene: default or showcase (default: showcase)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 225)
    --fov DEGREES       Field of view in degrees (default: 60)
    --depth DEPTH       Reflection/refraction recursion limit (default: 5)
    --output OUTPUT     Output file path (default: render.png)
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_scene --width 160 --height 90 --output showcase.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from whitted.core.integrator import MAX_DEPTH
from whitted.preview.export import save_png_from_array, save_ppm
from whitted.scene.presets import SCENES, RenderConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a preset scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="showcase",
        help="Preset scene to render (default: showcase)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=225,
        help="Image height in pixels (default: 225)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Reflection/refraction recursion limit (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path; .ppm writes PPM, anything else PNG (default: render.png)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def render_scene(config: RenderConfig, quiet: bool = False) -> Path:
    """Render the configured scene and save it to disk.

    Args:
        config: Validated render settings.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    if not quiet:
        print(f"Creating {config.scene} scene ({config.width}x{config.height})...")

    world, camera = config.build()

    start_time = time.time()

    def progress_callback(rows_done: int, rows_total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / rows_total) * 100 if rows_total > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{rows_total} rows "
                f"({progress_pct:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    image = camera.render(world, depth=config.max_depth, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(config.output)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(image, output_file)
    else:
        save_png_from_array(image, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = RenderConfig(
            scene=args.scene,
            width=args.width,
            height=args.height,
            field_of_view=args.fov,
            max_depth=args.depth,
            output=args.output,
        )
        render_scene(config, quiet=args.quiet)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
