"""Scene settings: defaults, overridable from the environment or a .env file.

    HEARTFIELD_WIDTH=1280 HEARTFIELD_HEIGHT=720 python apps/hearts.py
    HEARTFIELD_WIDTH=0 HEARTFIELD_HEIGHT=0 python apps/hearts.py   # desktop size
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from heartfield.canvas import Color

ENV_FILE = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True)
class Config:
    width: int = 900
    height: int = 900
    fps: int = 60
    title: str = "Heartfield"

    # Heart texture
    heart_count: int = 48
    base_amplitude: float = 1
    point_count: int = 100
    heart_size: float = 2

    # Circle field
    divisions: int = 90
    saturation: float = 70
    lightness: float = 50

    # Animation
    increment_step: float = 0.005
    background: Color = (0, 0, 0)

    @classmethod
    def from_env(cls, env_file: Path | None = ENV_FILE) -> "Config":
        """Defaults overridden by HEARTFIELD_* variables (a .env file is loaded first)."""
        if env_file is not None:
            load_dotenv(env_file)
        overrides = {}
        for key, (name, minimum) in _INT_VARS.items():
            value = os.environ.get(name)
            if value is not None:
                overrides[key] = _bounded_int(name, value, minimum)
        title = os.environ.get("HEARTFIELD_TITLE")
        if title:
            overrides["title"] = title
        return replace(cls(), **overrides)


_INT_VARS = {
    # 0 means "fit the desktop", see simulator.fit_to_display
    "width": ("HEARTFIELD_WIDTH", 0),
    "height": ("HEARTFIELD_HEIGHT", 0),
    "fps": ("HEARTFIELD_FPS", 1),
    # the red ramp divides by heart_count - 1
    "heart_count": ("HEARTFIELD_HEARTS", 2),
    "divisions": ("HEARTFIELD_DIVISIONS", 1),
}


def _bounded_int(name: str, value: str, minimum: int) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if number < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {number}")
    return number
