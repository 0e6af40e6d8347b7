"""RGBA pixel buffer that the heart texture is rasterized into."""

import colorsys
import math

import numpy as np

# Type alias for RGB / RGBA tuples
Color = tuple[int, ...]


class Canvas:
    """Offscreen RGBA render target for the heart texture.

    Pixels are stored as a flat bytearray in RGBA order: [R0,G0,B0,A0, R1,...]
    Row-major: pixel (x, y) is at index (y * width + x) * 4.
    Shapes are sampled at pixel centers and drawn opaque, no antialiasing.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height * 4)

    @property
    def pixels(self) -> np.ndarray:
        """Writable (height, width, 4) view over the buffer."""
        return np.frombuffer(self.buffer, dtype=np.uint8).reshape(self.height, self.width, 4)

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    def polygon(self, points, color: Color) -> None:
        """Fill a closed polygon (last point joins the first) by scanline.

        A pixel is painted when its center lies inside the polygon under
        the even-odd rule. Zero-length and horizontal edges contribute nothing.
        """
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or len(pts) < 2:
            raise ValueError("a polygon needs at least 2 points")
        x0, y0 = pts[:, 0], pts[:, 1]
        x1, y1 = np.roll(x0, -1), np.roll(y0, -1)

        top = max(0, math.floor(y0.min()))
        bottom = min(self.height - 1, math.ceil(y0.max()))
        rgba = _rgba(color)
        pixels = self.pixels
        for y in range(top, bottom + 1):
            sy = y + 0.5
            hit = ((y0 <= sy) & (y1 > sy)) | ((y1 <= sy) & (y0 > sy))
            if not hit.any():
                continue
            xs = x0[hit] + (sy - y0[hit]) * (x1[hit] - x0[hit]) / (y1[hit] - y0[hit])
            xs.sort()
            for left, right in zip(xs[0::2], xs[1::2]):
                start = max(0, math.ceil(left - 0.5))
                end = min(self.width, math.ceil(right - 0.5))
                if start < end:
                    pixels[y, start:end] = rgba

    @staticmethod
    def hsl(h: float, s: float = 100, l: float = 50) -> Color:
        """Convert HSL to an RGB tuple. h is 0-360, s and l are percentages."""
        r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)
        return (round(r * 255), round(g * 255), round(b * 255))

    @staticmethod
    def hex(color: int) -> Color:
        """Convert 0xRRGGBB integer to (R, G, B) tuple."""
        return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return bytes(self.buffer)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    """Normalize an RGB or RGBA tuple to RGBA (opaque when alpha is omitted)."""
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    if len(color) == 4:
        return tuple(color)
    raise ValueError(f"color must have 3 or 4 channels, got {color!r}")
