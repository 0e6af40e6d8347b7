"""Parametric heart curve."""

import math
from typing import NamedTuple

import numpy as np

from heartfield.mathutils import linspace


class Point(NamedTuple):
    x: float
    y: float


def generate_parametric_curve(amplitude: float = 1, points: int = 100, size: float = 1) -> list[Point]:
    """Sample the classic heart curve, centered on the origin, point down.

    x = 16 sin^3(t), y = -(13 cos t - 5 cos 2t - 2 cos 3t - cos 4t), both
    scaled by amplitude * size. t covers [0, 2*pi] inclusive, so the first
    and last points coincide.
    """
    if points < 2:
        raise ValueError(f"a curve needs at least 2 points, got {points}")
    t = np.asarray(linspace(0, 2 * math.pi, points))
    k = amplitude * size
    xs = 16 * np.sin(t) ** 3 * k
    ys = -(13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t)) * k
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
