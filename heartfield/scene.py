"""Build the scene once (texture -> pixels -> circles) and composite frames."""

from dataclasses import dataclass

import pygame

from heartfield.canvas import Canvas, Color
from heartfield.config import Config
from heartfield.field import CircleField, build_circle_field
from heartfield.sampler import PixelBuffer, extract_pixels
from heartfield.texture import draw_hearts


@dataclass(frozen=True)
class Scene:
    texture: Canvas
    pixels: PixelBuffer
    field: CircleField


def build_scene(config: Config) -> Scene:
    texture = Canvas(config.width, config.height)
    hearts = draw_hearts(texture, config.heart_count, config.base_amplitude,
                         config.point_count, config.heart_size)
    print(f"[heartfield] Rasterized {len(hearts)} hearts into {texture.width}x{texture.height} texture")

    pixels = extract_pixels(texture)
    circles = build_circle_field(pixels, config.divisions, config.saturation, config.lightness)
    print(f"[heartfield] Built {circles.columns}x{circles.rows} = {len(circles)} circles "
          f"(step {circles.step:.2f}px)")
    return Scene(texture, pixels, circles)


def draw_frame(surface: pygame.Surface, circles: CircleField, scales,
               background: Color = (0, 0, 0)) -> None:
    """Clear surface and draw every circle at its base radius times its scale.

    Works on the window surface and on plain offscreen surfaces alike.
    """
    surface.fill(background)
    for cell, scale in zip(circles.cells, scales):
        radius = cell.radius * float(scale)
        if radius > 0:
            pygame.draw.circle(surface, cell.color, (cell.x, cell.y), radius)
