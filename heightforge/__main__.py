"""CLI entry point for HeightForge."""

import argparse
import logging
from pathlib import Path

from .grid import InvalidConfig, InvalidDimension
from .heightmap import NoiseConfig, random_height_map
from .render import render, render_grayscale


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a value-noise terrain height map image"
    )
    parser.add_argument(
        "--width", "-W", type=int, default=512,
        help="Map width in pixels (default: 512)"
    )
    parser.add_argument(
        "--height", "-H", type=int, default=512,
        help="Map height in pixels (default: 512)"
    )
    parser.add_argument(
        "--octaves", "-n", type=int, default=7,
        help="Number of octaves to blend (default: 7)"
    )
    parser.add_argument(
        "--persistence", "-p", type=float, default=0.5,
        help="Amplitude decay per octave (default: 0.5)"
    )
    parser.add_argument(
        "--seed", "-s", nargs=4, type=int, default=[0, 0, 0, 0],
        metavar=("A", "B", "C", "D"),
        help="Four 32-bit seed words (default: 0 0 0 0)"
    )
    parser.add_argument(
        "--grayscale", "-g", action="store_true",
        help="Save raw heights as grayscale instead of terrain colours"
    )
    parser.add_argument(
        "--output", "-o", default="out.png",
        help="Output file path (default: out.png)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log generation details"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = NoiseConfig(
        octave_count=args.octaves,
        persistence=args.persistence,
        seed=tuple(args.seed),
    )

    try:
        height_map = random_height_map(args.width, args.height, config)
    except (InvalidDimension, InvalidConfig) as exc:
        parser.error(str(exc))

    if args.grayscale:
        image = render_grayscale(height_map)
    else:
        image = render(height_map)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output))
    print(f"Saved height map ({image.size[0]}x{image.size[1]}) to {output}")


if __name__ == "__main__":
    main()
