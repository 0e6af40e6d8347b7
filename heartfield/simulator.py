"""Pygame window that shows the circle field (or the raw heart texture)."""

from dataclasses import replace

import pygame

from heartfield.canvas import Canvas, Color
from heartfield.config import Config
from heartfield.field import CircleField
from heartfield.scene import draw_frame


def fit_to_display(config: Config) -> Config:
    """Replace a zero width/height with the desktop size.

    Falls back to the Config defaults when no desktop size is reported
    (e.g. under the dummy video driver).
    """
    if config.width and config.height:
        return config
    pygame.display.init()
    sizes = pygame.display.get_desktop_sizes()
    desktop_w, desktop_h = sizes[0] if sizes else (0, 0)
    default = Config()
    width = config.width or desktop_w or default.width
    height = config.height or desktop_h or default.height
    return replace(config, width=width, height=height)


class Simulator:
    """Opens a window sized to the scene and draws it once per frame."""

    def __init__(self, width: int, height: int, title: str = "Heartfield"):
        self.width = width
        self.height = height

        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.show_texture = False

    def poll(self) -> bool:
        """Handle window events. Returns False if the window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_t:
                    self.show_texture = not self.show_texture
        return True

    def update(self, circles: CircleField, scales, background: Color = (0, 0, 0)) -> bool:
        """Draw the circles at their current scales. Returns False if the window was closed."""
        if not self.poll():
            return False
        draw_frame(self.screen, circles, scales, background)
        pygame.display.flip()
        return True

    def show(self, canvas: Canvas) -> bool:
        """Blit a software canvas as-is. Returns False if the window was closed."""
        if not self.poll():
            return False
        image = pygame.image.frombuffer(canvas.get_buffer(), (canvas.width, canvas.height), "RGBA")
        self.screen.fill((0, 0, 0))
        self.screen.blit(image, (0, 0))
        pygame.display.flip()
        return True

    def tick(self, fps: int = 60) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
