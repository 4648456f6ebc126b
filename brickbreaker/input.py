"""Input sources polled once per tick by the simulation loop.

An input source answers two questions: which way the paddle should move
(``paddle_direction``) and whether the pointer has moved to a new x
position since the last poll (``pointer_x``). A pointer position, when
present, wins over the direction for that tick.
"""

import pygame

from brickbreaker.ball_paddle import Direction

RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)


class ScriptedInput:
    """Input whose intent is set directly, used by agents and tests."""

    def __init__(self, direction=Direction.NONE, pointer=None):
        self.direction = direction
        self.pointer = pointer

    def paddle_direction(self):
        return self.direction

    def pointer_x(self):
        return self.pointer


class KeyboardPointerInput:
    def __init__(self, field_left=0):
        self.field_left = field_left
        self._pending_pointer = None

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self._pending_pointer = event.pos[0] - self.field_left

    def paddle_direction(self):
        keys = pygame.key.get_pressed()
        if any(keys[k] for k in RIGHT_KEYS):
            return Direction.RIGHT
        if any(keys[k] for k in LEFT_KEYS):
            return Direction.LEFT
        return Direction.NONE

    def pointer_x(self):
        # Each pointer move is reported once so held keys still work after
        # the mouse stops.
        pointer, self._pending_pointer = self._pending_pointer, None
        return pointer
