"""Grid of circles colored and phased by sampling the heart texture."""

import math
from dataclasses import dataclass, field

import numpy as np

from heartfield.canvas import Canvas, Color
from heartfield.mathutils import linear_interpolation
from heartfield.sampler import PixelBuffer

DIVISIONS = 90


@dataclass(frozen=True)
class CircleCell:
    column: int
    row: int
    x: float
    y: float
    scale: float  # sampled value in [0, 1], also the animation phase
    hue: int
    color: Color
    radius: float  # base radius before scaling


@dataclass(frozen=True)
class CircleField:
    """Cells stored densely in construction order (column by column).

    phases holds each cell's sampled scale, in the same order.
    """

    step: float
    columns: int
    rows: int
    cells: tuple[CircleCell, ...] = ()
    phases: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(self.cells))
        phases = np.array([c.scale for c in self.cells], dtype=float)
        phases.flags.writeable = False
        object.__setattr__(self, "phases", phases)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def cell(self, column: int, row: int) -> CircleCell:
        return self.cells[column * self.rows + row]


def grid_step(width: int, height: int, divisions: int = DIVISIONS) -> float:
    if divisions <= 0:
        raise ValueError(f"divisions must be positive, got {divisions}")
    return max(width, height) / divisions


def grid_positions(extent: int, step: float) -> list[float]:
    """step, 2*step, ... up to extent inclusive, dropping positions past the last pixel."""
    positions = []
    k = 1
    while step * k <= extent:
        pos = step * k
        if math.floor(pos) < extent:
            positions.append(pos)
        k += 1
    return positions


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def build_circle_field(pixels: PixelBuffer, divisions: int = DIVISIONS,
                       saturation: float = 70, lightness: float = 50) -> CircleField:
    step = grid_step(pixels.width, pixels.height, divisions)
    xs = grid_positions(pixels.width, step)
    ys = grid_positions(pixels.height, step)
    radius = step / 2

    cells = []
    for column, x in enumerate(xs):
        for row, y in enumerate(ys):
            r = pixels.red(math.floor(x), math.floor(y))
            scale = linear_interpolation(r, 0, 255, 0, 1)
            hue = round_half_up(scale * 360)
            color = Canvas.hsl(hue, saturation, lightness)
            cells.append(CircleCell(column, row, x, y, scale, hue, color, radius))
    return CircleField(step, len(xs), len(ys), tuple(cells))
