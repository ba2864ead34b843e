"""Nonlinear two-dimensional diffusion filtering."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

Grid = Sequence[Sequence[float]]


def diffusivity(v: float, w: float, lam: float) -> float:
    """Diffusivity between two point values for contrast parameter lam."""
    if lam <= 0:
        raise ValueError("contrast parameter must be positive")
    ratio = abs(v - w) ** 0.2 / lam
    if ratio != 0.0:
        ratio = -(ratio / 5.0)
    return math.exp(ratio)


def _triples(seq: Sequence[T]) -> Iterable[tuple[T, T, T]]:
    return zip(seq, seq[1:], seq[2:])


def _pad(grid: Grid) -> list[list[float]]:
    rows = [[row[0], *row, row[-1]] for row in grid]
    return [rows[0], *rows, rows[-1]]


def diffuse(grid: Grid, time_step: float, lam: float) -> list[list[float]]:
    """Apply one explicit diffusion step with a 9-point stencil.

    Boundaries are mirrored; the input is left unchanged and a new grid
    is returned.
    """
    if time_step <= 0:
        raise ValueError("time step must be positive")
    if lam <= 0:
        raise ValueError("contrast parameter must be positive")
    if not grid:
        return []
    width = len(grid[0])
    if width == 0 or any(len(row) != width for row in grid):
        raise ValueError("grid must be rectangular and non-empty")

    def weight(centre: float, neighbour: float) -> float:
        return (1.0 - math.exp(-8.0 * time_step * diffusivity(centre, neighbour, lam))) / 8.0

    result = []
    for prev, cur, nxt in _triples(_pad(grid)):
        new_row = []
        for (sw, w, nw), (s, c, n), (se, e, ne) in zip(
            _triples(prev), _triples(cur), _triples(nxt)
        ):
            neighbours = (n, ne, e, se, s, sw, w, nw)
            weights = [weight(c, value) for value in neighbours]
            centre_weight = 1.0 - sum(weights)
            new_row.append(
                centre_weight * c
                + sum(q * value for q, value in zip(weights, neighbours))
            )
        result.append(new_row)
    return result