"""Small numeric helpers shared by the curve, field and animation code."""

import math

import numpy as np


def linear_interpolation(x, x1: float, x2: float, y1: float, y2: float):
    """Map x from [x1, x2] onto [y1, y2].

    Values outside the domain extrapolate linearly (the animation relies on
    this to remap a [-1, 1] sine onto [0, 1]). x may be a numpy array.
    """
    if x1 == x2:
        raise ValueError(f"interpolation bounds must differ (x1 == x2 == {x1})")
    return y1 + (y2 - y1) * (x - x1) / (x2 - x1)


def linspace(start: float, stop: float, num: int, endpoint: bool = True) -> list[float]:
    """Return num evenly spaced values from start towards stop."""
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")
    if num == 0:
        return []
    div = num - 1 if endpoint else num
    if div == 0:
        return [float(start)]
    step = (stop - start) / div
    return [start + step * i for i in range(num)]


def sinusoidal_function(x, amplitude: float = 1, period: float = 1):
    """amplitude * sin(2*pi*x / period). Accepts scalars or numpy arrays."""
    if period == 0:
        raise ValueError("period must be non-zero")
    return amplitude * np.sin(2 * math.pi * x / period)


def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Pack RGB channels into a 0xRRGGBB integer. Channels are clamped to 0-255."""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return (r << 16) | (g << 8) | b


def get_color(index: int, total: int, hue_start: float = 0, hue_end: float = 300) -> str:
    """Spread index/total over a hue range and format it as a CSS hsl() string.

    index == total is allowed and lands exactly on hue_end.
    """
    if total == 0:
        raise ValueError("total must be non-zero")
    hue = hue_start + math.floor(index / total * (hue_end - hue_start))
    return f"hsl({hue}, 100%, 50%)"
