"""Score, lives and phase bookkeeping.

``GameStateMachine`` owns a single ``GameState`` aggregate. The grid and the
ball/paddle state inside it belong to the current round and are replaced
wholesale whenever a new game starts.
"""

import enum
import logging
from dataclasses import dataclass

import numpy as np

from brickbreaker.ball_paddle import BallPaddleState
from brickbreaker.collision import EventKind
from brickbreaker.grid import BrickGrid

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    GAME_CLEAR = "game_clear"

    @property
    def terminal(self):
        return self in (Phase.GAME_OVER, Phase.GAME_CLEAR)


STARTABLE_PHASES = (Phase.IDLE, Phase.GAME_OVER, Phase.GAME_CLEAR)
PAUSABLE_PHASES = (Phase.RUNNING, Phase.PAUSED)


@dataclass
class GameState:
    score: int
    lives: int
    phase: Phase
    grid: BrickGrid
    ball_paddle: BallPaddleState


class GameStateMachine:
    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.state = self._fresh_state(Phase.IDLE)

    def _fresh_state(self, phase):
        return GameState(
            score=0,
            lives=self.config.starting_lives,
            phase=phase,
            grid=BrickGrid.create_grid(self.config),
            ball_paddle=BallPaddleState(self.config, rng=self.rng),
        )

    @property
    def phase(self):
        return self.state.phase

    def _set_phase(self, phase):
        if phase is not self.state.phase:
            logger.info("Phase %s -> %s (score=%d, lives=%d)",
                        self.state.phase.value, phase.value, self.state.score, self.state.lives)
        self.state.phase = phase

    # --- Control surface ---

    def start(self):
        if self.state.phase not in STARTABLE_PHASES:
            logger.debug("start() ignored in phase %s", self.state.phase.value)
            return False
        previous = self.state.phase
        self.state = self._fresh_state(previous)
        self._set_phase(Phase.RUNNING)
        return True

    def restart(self):
        """Start a new game after a game over or a cleared board."""
        if not self.state.phase.terminal:
            logger.debug("restart() ignored in phase %s", self.state.phase.value)
            return False
        return self.start()

    def toggle_pause(self):
        if self.state.phase not in PAUSABLE_PHASES:
            logger.debug("toggle_pause() ignored in phase %s", self.state.phase.value)
            return False
        if self.state.phase is Phase.RUNNING:
            self._set_phase(Phase.PAUSED)
        else:
            self._set_phase(Phase.RUNNING)
        return True

    # --- Collision events ---

    def handle_event(self, event):
        state = self.state
        if state.phase is not Phase.RUNNING:
            return

        if event.kind is EventKind.BRICK_BROKEN:
            state.score += event.points
        elif event.kind is EventKind.LIFE_LOST:
            state.lives -= 1
            if state.lives <= 0:
                state.lives = 0
                self._set_phase(Phase.GAME_OVER)
            else:
                logger.info("Life lost, %d remaining", state.lives)
                state.ball_paddle.reset()
        elif event.kind is EventKind.ALL_BRICKS_CLEARED:
            self._set_phase(Phase.GAME_CLEAR)

    def handle_events(self, events):
        for event in events:
            self.handle_event(event)
