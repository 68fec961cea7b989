# src/gridsnake/__init__.py
"""Grid snake: a fixed-tick board simulation with a pygame front-end."""

from gridsnake.board import Board, OutOfBounds
from gridsnake.config import Boundary, Direction, EndReason, GameConfig
from gridsnake.engine import Session, advance_tick, new_game, place_food_randomly
from gridsnake.latch import InputLatch
from gridsnake.loop import GameLoop, LoopState, Snapshot

__all__ = [
    "Board", "OutOfBounds",
    "Boundary", "Direction", "EndReason", "GameConfig",
    "Session", "advance_tick", "new_game", "place_food_randomly",
    "InputLatch",
    "GameLoop", "LoopState", "Snapshot",
]
