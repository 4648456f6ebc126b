import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from brickbreaker.config import GameConfig
from brickbreaker.input import ScriptedInput
from brickbreaker.loop import SimulationLoop
from brickbreaker.state_machine import GameStateMachine


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw_frame(self, grid, ball_paddle, phase, score=0, lives=0):
        self.frames.append((phase, score, lives, ball_paddle.ball_pos))


class RecordingTonePlayer:
    def __init__(self):
        self.played = []
        self.suspended = 0
        self.resumed = 0

    def play(self, kind):
        self.played.append(kind)

    def suspend(self):
        self.suspended += 1

    def resume(self):
        self.resumed += 1


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def machine(config, rng):
    return GameStateMachine(config, rng=rng)


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def tones():
    return RecordingTonePlayer()


@pytest.fixture
def loop(machine, scripted_input, renderer, tones):
    return SimulationLoop(machine, scripted_input, renderer=renderer, tone_player=tones)
