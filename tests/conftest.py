import os

import pytest

# Keep pygame quiet and headless when heartfield is imported
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

ENV_VARS = [
    "HEARTFIELD_WIDTH",
    "HEARTFIELD_HEIGHT",
    "HEARTFIELD_FPS",
    "HEARTFIELD_HEARTS",
    "HEARTFIELD_DIVISIONS",
    "HEARTFIELD_TITLE",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset HEARTFIELD_* for the test; teardown also removes anything a .env file loads."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
