"""Main run loop - builds the scene once, then pulses it every frame."""

from heartfield.animation import AnimationState, advance, frame_scales
from heartfield.config import Config
from heartfield.scene import Scene, build_scene
from heartfield.simulator import Simulator, fit_to_display


def run(config: Config | None = None, scene: Scene | None = None) -> None:
    """Open the window and animate until it is closed.

    Each frame draws the circles for the current state and then advances the
    state by config.increment_step. Press T to flip to the heart texture the
    circles were sampled from, Escape to quit. A prebuilt scene must match
    config's width and height.
    """
    config = config or fit_to_display(Config.from_env())
    scene = scene or build_scene(config)
    sim = Simulator(config.width, config.height, title=config.title)
    state = AnimationState()

    try:
        while True:
            if sim.show_texture:
                alive = sim.show(scene.texture)
            else:
                alive = sim.update(scene.field, frame_scales(scene.field, state), config.background)
            if not alive:
                break

            sim.tick(config.fps)
            state = advance(state, config.increment_step)
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
