
import numpy as np
import pygame
import pygame.gfxdraw

from brickbreaker.config import (
    BRICK_COLORS,
    COLOR_BALL,
    COLOR_BG,
    COLOR_HINT,
    COLOR_OVERLAY,
    COLOR_PADDLE,
    COLOR_TEXT,
)
from brickbreaker.state_machine import Phase


CONTROLS_HINT = "ARROWS/A/D or mouse to move, P to pause"


class Renderer:
    """Paints the game onto a pygame surface.

    Pass the display surface for windowed play; without one an off-screen
    surface is created, which is what the gymnasium environment reads back
    with ``to_array``.
    """

    def __init__(self, config, surface=None):
        self.config = config
        pygame.font.init()
        self.screen = surface if surface is not None else pygame.Surface(
            (config.field_width, config.field_height)
        )
        self.font_small = pygame.font.SysFont("monospace", 18, bold=True)
        self.font_large = pygame.font.SysFont("monospace", 50, bold=True)
        self.font_medium = pygame.font.SysFont("monospace", 26, bold=True)

    def draw_frame(self, grid, ball_paddle, phase, score=0, lives=0):
        self.screen.fill(COLOR_BG)

        if phase is Phase.IDLE:
            self._render_screen("BRICK BREAKER", "Press ENTER or click to start")
            return
        if phase is Phase.GAME_OVER:
            self._render_screen("GAME OVER", f"Final score: {score}", "Press ENTER to play again")
            return
        if phase is Phase.GAME_CLEAR:
            self._render_screen("CLEARED!", f"Score: {score}", "Press ENTER for a new game")
            return

        self._render_game(grid, ball_paddle)
        self._render_ui(score, lives)
        if phase is Phase.PAUSED:
            self._render_pause()

    def _render_game(self, grid, ball_paddle):
        cfg = self.config

        # Bricks
        for brick in grid.alive_bricks():
            rect = pygame.Rect(brick.x, brick.y, brick.width, brick.height)
            pygame.draw.rect(self.screen, BRICK_COLORS[brick.kind], rect)

        # Ball
        pygame.gfxdraw.filled_circle(
            self.screen, int(ball_paddle.x), int(ball_paddle.y), int(cfg.ball_radius), COLOR_BALL
        )
        pygame.gfxdraw.aacircle(
            self.screen, int(ball_paddle.x), int(ball_paddle.y), int(cfg.ball_radius), COLOR_BALL
        )

        # Paddle
        paddle = pygame.Rect(ball_paddle.paddle_x, ball_paddle.paddle_y, cfg.paddle_width, cfg.paddle_height)
        pygame.draw.rect(self.screen, COLOR_PADDLE, paddle)

    def _render_ui(self, score, lives):
        score_text = self.font_small.render(f"SCORE: {score}", True, COLOR_TEXT)
        self.screen.blit(score_text, (10, 8))

        lives_text = self.font_small.render(f"LIVES: {lives}", True, COLOR_TEXT)
        self.screen.blit(lives_text, (self.config.field_width - lives_text.get_width() - 10, 8))

        hint = self.font_small.render(CONTROLS_HINT, True, COLOR_HINT)
        self.screen.blit(hint, hint.get_rect(center=(self.config.field_width / 2, 16)))

    def _render_pause(self):
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))
        text = self.font_large.render("PAUSED", True, COLOR_TEXT)
        center = (self.config.field_width / 2, self.config.field_height / 2)
        self.screen.blit(text, text.get_rect(center=center))

    def _render_screen(self, title, *lines):
        cx = self.config.field_width / 2
        cy = self.config.field_height / 2

        title_text = self.font_large.render(title, True, COLOR_TEXT)
        self.screen.blit(title_text, title_text.get_rect(center=(cx, cy - 60)))
        for i, line in enumerate(lines):
            text = self.font_medium.render(line, True, COLOR_TEXT)
            self.screen.blit(text, text.get_rect(center=(cx, cy + i * 40)))

    def to_array(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)
