"""Play the game in a window: ``python -m brickbreaker``."""

import argparse
import logging
import os

import numpy as np
import pygame

from brickbreaker.audio import TonePlayer
from brickbreaker.config import DEFAULT_CONFIG
from brickbreaker.input import KeyboardPointerInput
from brickbreaker.logging_config import setup_logging
from brickbreaker.loop import SimulationLoop
from brickbreaker.render import Renderer
from brickbreaker.state_machine import GameStateMachine

logger = logging.getLogger("brickbreaker")

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


def build_parser():
    parser = argparse.ArgumentParser(prog="brickbreaker", description="Break all the bricks.")
    parser.add_argument("--fps", type=int, default=60, help="Frames (ticks) per second. Default: 60")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the serve direction")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. Default: INFO",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    # For human play, we want a real display.
    if os.environ.get("SDL_VIDEODRIVER") == "dummy":
        del os.environ["SDL_VIDEODRIVER"]

    config = DEFAULT_CONFIG
    pygame.init()
    screen = pygame.display.set_mode((config.field_width, config.field_height))
    pygame.display.set_caption("Brick Breaker")
    clock = pygame.time.Clock()

    machine = GameStateMachine(config, rng=np.random.default_rng(args.seed))
    input_source = KeyboardPointerInput()
    loop = SimulationLoop(
        machine,
        input_source,
        renderer=Renderer(config, surface=screen),
        tone_player=TonePlayer(enabled=not args.mute),
    )
    loop.render()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    loop.toggle_pause()
                elif event.key in START_KEYS:
                    loop.start()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                loop.start()
            input_source.handle_event(event)

        # Paused, idle and finished games only redraw their screen.
        loop.tick()
        pygame.display.flip()
        clock.tick(args.fps)

    logger.info("Final score: %d", machine.state.score)
    pygame.quit()


if __name__ == "__main__":
    main()
