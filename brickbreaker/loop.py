import logging
from dataclasses import dataclass
from typing import Tuple

from brickbreaker.audio import ToneKind
from brickbreaker.collision import CollisionResolver, EventKind, GameEvent
from brickbreaker.state_machine import Phase

logger = logging.getLogger(__name__)

EVENT_TONES = {
    EventKind.BRICK_BROKEN: ToneKind.BRICK,
    EventKind.WALL_BOUNCED: ToneKind.WALL,
    EventKind.PADDLE_BOUNCED: ToneKind.PADDLE,
    EventKind.LIFE_LOST: ToneKind.LOSE_LIFE,
    EventKind.ALL_BRICKS_CLEARED: ToneKind.WIN,
}


@dataclass(frozen=True)
class TickResult:
    events: Tuple[GameEvent, ...]
    phase: Phase
    advanced: bool


class SimulationLoop:
    """Runs one simulation step per frame.

    Order within a tick is fixed: paddle input, collision resolution,
    event handling, ball move, then the renderer and tone player. Nothing
    moves unless the phase is RUNNING.
    """

    def __init__(self, machine, input_source, renderer=None, tone_player=None):
        self.machine = machine
        self.input_source = input_source
        self.renderer = renderer
        self.tone_player = tone_player
        self.resolver = CollisionResolver(machine.config)

    @property
    def state(self):
        return self.machine.state

    @property
    def scheduled(self):
        return self.machine.phase is Phase.RUNNING

    # --- Control surface ---

    def start(self):
        if self.machine.phase.terminal:
            started = self.machine.restart()
        else:
            started = self.machine.start()
        if started:
            self._call(self.tone_player, "resume")
            self.render()
        return started

    def toggle_pause(self):
        if not self.machine.toggle_pause():
            return False
        if self.machine.phase is Phase.PAUSED:
            self._call(self.tone_player, "suspend")
        else:
            self._call(self.tone_player, "resume")
        self.render()
        return True

    # --- Tick ---

    def tick(self):
        if not self.scheduled:
            self.render()
            return TickResult(events=(), phase=self.machine.phase, advanced=False)

        state = self.machine.state
        ball_paddle = state.ball_paddle

        # A pointer outside the field falls back to the held keys.
        pointer = self.input_source.pointer_x()
        if pointer is None or not ball_paddle.set_paddle_from_pointer(pointer):
            ball_paddle.apply_paddle_input(self.input_source.paddle_direction())

        events = self.resolver.resolve(ball_paddle, state.grid)
        self.machine.handle_events(events)

        advanced = self.machine.phase is Phase.RUNNING
        if advanced:
            # A life lost above may have re-served the ball; the move still
            # happens from the new position.
            state.ball_paddle.advance()

        self._play_tones(events)
        self.render()
        return TickResult(events=tuple(events), phase=self.machine.phase, advanced=advanced)

    def _play_tones(self, events):
        if self.tone_player is None:
            return
        for event in events:
            self._call(self.tone_player, "play", EVENT_TONES[event.kind])
        if self.machine.phase is Phase.GAME_OVER and events:
            self._call(self.tone_player, "play", ToneKind.GAME_OVER)

    def render(self):
        state = self.machine.state
        self._call(
            self.renderer, "draw_frame",
            state.grid, state.ball_paddle, state.phase,
            score=state.score, lives=state.lives,
        )

    def _call(self, collaborator, method, *args, **kwargs):
        if collaborator is None:
            return
        try:
            getattr(collaborator, method)(*args, **kwargs)
        except Exception:
            # Collaborators are output only; their failures never reach game state.
            logger.warning("%s.%s failed", type(collaborator).__name__, method, exc_info=True)
