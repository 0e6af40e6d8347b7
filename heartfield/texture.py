"""Rasterize nested hearts into an offscreen canvas.

Each heart i gets amplitude base_amplitude + i and a pure red fill that ramps
from 0 (i = 0) to 255 (i = heart_count - 1). Hearts are drawn largest first so
the smaller, darker ones overdraw them and leave concentric red bands. The
red channel of the result is what the circle field samples.
"""

import math
from dataclasses import dataclass

from heartfield.canvas import Canvas
from heartfield.curve import generate_parametric_curve
from heartfield.mathutils import rgb_to_hex


@dataclass(frozen=True)
class HeartInstance:
    index: int
    amplitude: float
    color: int  # 0xRRGGBB


def heart_instances(heart_count: int, base_amplitude: float = 1) -> list[HeartInstance]:
    """Hearts in draw order (descending index)."""
    if heart_count < 2:
        raise ValueError(f"heart_count must be at least 2, got {heart_count}")
    hearts = []
    for i in range(heart_count - 1, -1, -1):
        r = math.floor(i / (heart_count - 1) * 255)
        hearts.append(HeartInstance(i, base_amplitude + i, rgb_to_hex(r, 0, 0)))
    return hearts


def draw_hearts(canvas: Canvas, heart_count: int = 48, base_amplitude: float = 1,
                point_count: int = 100, size: float = 2) -> list[HeartInstance]:
    """Draw every heart, centered, onto canvas. Returns the hearts drawn."""
    cx, cy = canvas.center
    hearts = heart_instances(heart_count, base_amplitude)
    for heart in hearts:
        curve = generate_parametric_curve(heart.amplitude, point_count, size)
        canvas.polygon([(p.x + cx, p.y + cy) for p in curve], Canvas.hex(heart.color))
    return hearts
