import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest


class ScriptedRng:
    """Random source that hands out pre-set randrange() results in order."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng
