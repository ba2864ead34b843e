"""Smooth a PGM image with nonlinear diffusion."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator

from oslab.diffusion import diffuse
from oslab.pgm import PgmError, PgmImage, read_ascii_pgm, write_binary_pgm


def _to_grid(image: PgmImage) -> list[list[float]]:
    return [
        [float(value) for value in image.pixels[row * image.width : (row + 1) * image.width]]
        for row in range(image.height)
    ]


def _to_image(grid: list[list[float]], template: PgmImage) -> PgmImage:
    pixels = bytearray(int(value) & 0xFF for row in grid for value in row)
    return PgmImage(template.width, template.height, template.max_value, pixels)


def _iterate(
    grid: list[list[float]], lam: float, iterations: int, time_step: float
) -> Iterator[list[list[float]]]:
    if iterations < 0:
        raise ValueError("number of iterations must not be negative")
    for _ in range(iterations):
        grid = diffuse(grid, time_step, lam)
        yield grid


def smooth(image: PgmImage, lam: float, iterations: int, time_step: float = 0.5) -> PgmImage:
    """Return a copy of the image after the given number of diffusion steps."""
    grid = _to_grid(image)
    for grid in _iterate(grid, lam, iterations, time_step):
        pass
    return _to_image(grid, image)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oslab-fda", description="Nonlinear diffusion filtering of a PGM image."
    )
    parser.add_argument("input", nargs="?", help="plain (P2) PGM input file")
    parser.add_argument("output", nargs="?", help="raw (P5) PGM output file")
    parser.add_argument("--lam", type=float, help="contrast parameter (>0)")
    parser.add_argument("--iterations", type=int, help="number of iterations")
    args = parser.parse_args(argv)

    input_path = args.input or input("name of input PGM image file (with extender): ").strip()
    try:
        image = read_ascii_pgm(input_path)
    except PgmError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"width = {image.width}")
    print(f"height = {image.height}")
    print(f"max = {image.max_value}")

    try:
        lam = args.lam if args.lam is not None else float(
            input("contrast parameter lambda (>0) : ")
        )
        iterations = args.iterations if args.iterations is not None else int(
            input("number of iterations: ")
        )
        grid = _to_grid(image)
        for number, grid in enumerate(_iterate(grid, lam, iterations, 0.5), start=1):
            print(f"iteration number: {number:3d} ")
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    result = _to_image(grid, image)

    output_path = args.output or input("name of output PGM image file (with extender): ").strip()
    try:
        write_binary_pgm(result, output_path)
    except PgmError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())