"""Read-only snapshot of a canvas's RGBA pixels."""

from dataclasses import dataclass

from heartfield.canvas import Canvas


@dataclass(frozen=True)
class PixelBuffer:
    """Flat RGBA bytes, row-major. Red of (x, y) lives at (y * width + x) * 4."""

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"pixel data is {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return (y * self.width + x) * 4

    def red(self, x: int, y: int) -> int:
        return self.data[self.index(x, y)]

    def rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        idx = self.index(x, y)
        return tuple(self.data[idx:idx + 4])


def extract_pixels(canvas: Canvas) -> PixelBuffer:
    """Copy the canvas buffer once; later drawing on the canvas is not seen."""
    return PixelBuffer(canvas.width, canvas.height, canvas.get_buffer())
