"""Animated field of pulsing circles sampled from a rasterized heart pattern."""

from heartfield.config import Config
from heartfield.run import run

__all__ = ["Config", "run"]
