"""Heartfield - a grid of circles pulsing over a rasterized heart pattern."""

import sys

from heartfield import Config, run
from heartfield.scene import build_scene
from heartfield.simulator import fit_to_display


def main() -> None:
    try:
        config = fit_to_display(Config.from_env())
        scene = build_scene(config)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    print(f"[heartfield] {config.width}x{config.height} @ {config.fps} fps. T: texture view, Esc: quit")
    run(config, scene)


if __name__ == "__main__":
    main()
