#!/usr/bin/env python3
"""Render the heart texture and an animated GIF of the circle field headlessly.

Usage: python record_gifs.py [width height]
Output: media/heartfield-texture.png, media/demo-heartfield.gif
"""

import os
import sys

# Prevent pygame from opening windows or printing its banner
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from dataclasses import replace
from pathlib import Path

import pygame
from PIL import Image

from heartfield.animation import AnimationState, advance, frame_scales
from heartfield.canvas import Canvas
from heartfield.config import Config
from heartfield.scene import build_scene, draw_frame

ROOT = Path(__file__).parent
MEDIA_DIR = ROOT / "media"

# GIF settings
SIZE = 360         # Default square canvas; full-size textures are slow to rasterize
DURATION_S = 4.0   # Seconds of animation per GIF
GIF_FPS = 20       # Frames per second in the GIF


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """Convert a Canvas buffer to a PIL Image (RGB, alpha dropped)."""
    img = Image.frombytes("RGBA", (canvas.width, canvas.height), canvas.get_buffer())
    return img.convert("RGB")


def surface_to_image(surface: pygame.Surface) -> Image.Image:
    """Convert a pygame Surface to a PIL Image."""
    return Image.frombytes("RGB", surface.get_size(), pygame.image.tobytes(surface, "RGB"))


def record_texture(scene, out_path: Path) -> None:
    canvas_to_image(scene.texture).save(out_path)
    print(f"  Saved {out_path}")


def record_animation(scene, config: Config, out_path: Path,
                     fps: float = GIF_FPS, duration: float = DURATION_S) -> None:
    """Render frames and save as animated GIF.

    The live loop advances by config.increment_step per display frame; the
    GIF samples that loop every (display fps / gif fps) frames so playback
    speed matches.
    """
    n_frames = int(duration * fps)
    frames_per_sample = max(1, round(config.fps / fps))
    surface = pygame.Surface((config.width, config.height))
    state = AnimationState()
    frames = []

    for _ in range(n_frames):
        draw_frame(surface, scene.field, frame_scales(scene.field, state), config.background)
        frames.append(surface_to_image(surface))
        for _ in range(frames_per_sample):
            state = advance(state, config.increment_step)

    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"  Saved {out_path} ({len(frames)} frames, {duration}s)")


def main(argv: list[str]) -> None:
    try:
        width, height = (int(a) for a in argv[:2]) if len(argv) >= 2 else (SIZE, SIZE)
        config = replace(Config.from_env(), width=width, height=height)
        scene = build_scene(config)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    MEDIA_DIR.mkdir(exist_ok=True)
    print(f"\nRecording heartfield to {MEDIA_DIR}/\n")
    record_texture(scene, MEDIA_DIR / "heartfield-texture.png")
    record_animation(scene, config, MEDIA_DIR / "demo-heartfield.gif")
    print(f"\nDone! Files saved to {MEDIA_DIR}/")


if __name__ == "__main__":
    main(sys.argv[1:])
