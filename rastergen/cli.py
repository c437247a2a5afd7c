"""
rastergen/cli.py
Command-line interface for rastergen

Usage:
    python -m rastergen render --seed 4 --output output/test_image.ppm
    python -m rastergen render --size 512 --count 64 --verbose
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from . import __version__
from .canvas import Canvas
from .compose import compose_scene
from .config import FORMAT_VERSION, RENDER_CONFIG
from .stream import HashStream, stable_u32

logger = logging.getLogger("rastergen")


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def _parse_seed(value: str) -> int:
    """Integers are used as-is; any other string is hashed to a u32."""
    try:
        return int(value)
    except ValueError:
        return stable_u32("seed", value)


def cmd_render(args: argparse.Namespace) -> int:
    """Render a scene and write it as PPM."""
    if args.size <= 0:
        print(f"ERROR: --size must be positive, got {args.size}")
        return 1
    if args.count < 0:
        print(f"ERROR: --count must be non-negative, got {args.count}")
        return 1

    seed = _parse_seed(args.seed)
    output_path = Path(args.output)

    canvas = Canvas(args.size, args.size)
    rand = HashStream.seeded(seed)

    start = time.perf_counter()
    report = compose_scene(canvas, rand, count=args.count, seed=seed)
    elapsed = time.perf_counter() - start
    logger.info(f"Rendered {report.shape_count} shapes in {elapsed * 1000:.1f} ms")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        written = canvas.save(output_path)
    except OSError as e:
        print(f"ERROR: Could not write {output_path}: {e}")
        return 1

    print(f"Generated: {output_path}")
    print(f"  size:   {canvas.width}x{canvas.height}")
    print(f"  seed:   {seed}")
    print(f"  shapes: {report.by_kind}")
    print(f"  bytes:  {written}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="rastergen",
        description="Deterministic procedural image generator",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {__version__} ({FORMAT_VERSION})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a scene to PPM")
    render_parser.add_argument("--size", type=int, default=RENDER_CONFIG.size, help="Canvas width and height")
    render_parser.add_argument("--seed", "-s", type=str, default=str(RENDER_CONFIG.seed), help="Seed (int or any string)")
    render_parser.add_argument("--count", "-n", type=int, default=RENDER_CONFIG.shape_count, help="Number of shapes")
    render_parser.add_argument("--output", "-o", type=str, default=RENDER_CONFIG.output, help="Output .ppm path")
    render_parser.add_argument("--verbose", "-v", action="store_true", help="Log every shape")
    render_parser.set_defaults(func=cmd_render)

    args = parser.parse_args(argv)
    _setup_logging(getattr(args, "verbose", False))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
