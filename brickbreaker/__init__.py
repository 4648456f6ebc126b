from brickbreaker.ball_paddle import BallPaddleState, Direction
from brickbreaker.collision import CollisionResolver, EventKind, GameEvent
from brickbreaker.config import DEFAULT_CONFIG, GameConfig
from brickbreaker.grid import Brick, BrickGrid, BrickKind, BrickStatus
from brickbreaker.loop import SimulationLoop, TickResult
from brickbreaker.state_machine import GameState, GameStateMachine, Phase

__all__ = [
    "BallPaddleState",
    "Brick",
    "BrickGrid",
    "BrickKind",
    "BrickStatus",
    "CollisionResolver",
    "DEFAULT_CONFIG",
    "Direction",
    "EventKind",
    "GameConfig",
    "GameEvent",
    "GameState",
    "GameStateMachine",
    "Phase",
    "SimulationLoop",
    "TickResult",
]
