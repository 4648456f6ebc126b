import logging
import os

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import MultiDiscrete

from brickbreaker.ball_paddle import Direction
from brickbreaker.collision import EventKind
from brickbreaker.config import DEFAULT_CONFIG
from brickbreaker.input import ScriptedInput
from brickbreaker.loop import SimulationLoop
from brickbreaker.render import Renderer
from brickbreaker.state_machine import GameStateMachine, Phase

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

logger = logging.getLogger(__name__)

MOVEMENT_DIRECTIONS = {
    0: Direction.NONE,
    1: Direction.NONE,  # up
    2: Direction.NONE,  # down
    3: Direction.LEFT,
    4: Direction.RIGHT,
}


class BrickBreakerEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = "Controls: ←/→ or A/D to move the paddle. Enter/Space to start, P to pause."

    # Must be a short, user-facing description of the game:
    game_description = (
        "Bounce the ball off your paddle to break every brick. "
        "The top two rows are worth double. You have three lives."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    # --- Constants ---
    MAX_STEPS = 10000

    # Rewards
    REWARD_PER_POINT = 0.1
    REWARD_LIFE_LOST = -10.0
    REWARD_WIN = 50.0
    REWARD_LOSE = -50.0

    def __init__(self, render_mode="rgb_array", config=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config or DEFAULT_CONFIG

        self.observation_space = gym.spaces.Box(
            low=0, high=255,
            shape=(self.config.field_height, self.config.field_width, 3),
            dtype=np.uint8,
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.renderer = Renderer(self.config)
        self.input = ScriptedInput()

        # Game state is initialized in reset()
        self.machine = None
        self.loop = None
        self.steps = 0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.machine = GameStateMachine(self.config, rng=self.np_random)
        self.loop = SimulationLoop(self.machine, self.input, renderer=self.renderer)
        self.input.direction = Direction.NONE
        self.input.pointer = None
        self.loop.start()
        self.steps = 0
        logger.debug("Environment reset (seed=%s)", seed)

        return self._get_observation(), self._get_info()

    def step(self, action):
        movement, start_pressed, pause_pressed = (int(a) for a in action)

        was_terminal = self.machine.phase.terminal

        # --- Handle Input ---
        if start_pressed:
            self.loop.start()
        if pause_pressed:
            self.loop.toggle_pause()
        self.input.direction = MOVEMENT_DIRECTIONS[movement]

        # --- Update Game Logic ---
        result = self.loop.tick()
        self.steps += 1

        reward = 0.0
        for event in result.events:
            if event.kind is EventKind.BRICK_BROKEN:
                reward += event.points * self.REWARD_PER_POINT
            elif event.kind is EventKind.LIFE_LOST:
                reward += self.REWARD_LIFE_LOST

        # --- Check Termination ---
        terminated = self.machine.phase.terminal
        truncated = False
        if terminated and not was_terminal:
            if self.machine.phase is Phase.GAME_CLEAR:
                reward += self.REWARD_WIN
            else:
                reward += self.REWARD_LOSE
        elif not terminated and self.steps >= self.MAX_STEPS:
            truncated = True

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        return self.renderer.to_array()

    def _get_info(self):
        state = self.machine.state
        return {
            "score": state.score,
            "lives": state.lives,
            "steps": self.steps,
            "bricks_left": state.grid.count_alive(),
            "phase": state.phase.value,
        }

    def close(self):
        pygame.quit()
