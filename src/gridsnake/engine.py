# src/gridsnake/engine.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple
import logging
import random

from .board import Board, Cell
from .config import FOOD, Boundary, Direction, EndReason, GameConfig
from .rng import random_select

logger = logging.getLogger(__name__)


# ---------- State ----------
@dataclass(frozen=True)
class Session:
    length: int                    # target body length, grows on feeding
    head: Cell
    direction: Direction           # last committed direction
    score: int = 0
    elapsed_ms: float = 0.0        # time accumulated since the last tick
    is_game_over: bool = False
    is_win: bool = False
    ticks: int = 0
    end_reason: Optional[EndReason] = None

    def ended(self, reason: EndReason) -> "Session":
        return replace(
            self, elapsed_ms=0.0, is_game_over=True, is_win=reason.is_win, end_reason=reason
        )


def place_food_randomly(board: Board, rng: random.Random) -> Optional[Cell]:
    """
    Put food on a uniformly random empty cell of `board` (mutated in place).
    Returns the chosen cell, or None when there is no empty cell left.
    """
    candidates = board.empty_cells()
    if not candidates:
        return None
    x, y = random_select(rng, candidates)
    board.set_cell(x, y, FOOD)
    return (x, y)


def new_game(config: GameConfig, rng: random.Random) -> Tuple[Board, Session]:
    """
    Fresh board and session: head in the centre facing East, the body laid out
    westward with tags start_length..1, and one food cell. A snake that
    already fills the board starts out as a finished, won game.
    """
    board = Board.create(config.width, config.height)
    hx, hy = config.width // 2, config.height // 2
    for i in range(config.start_length):
        board.set_cell(hx - i, hy, config.start_length - i)
    session = Session(length=config.start_length, head=(hx, hy), direction=Direction.EAST)
    if place_food_randomly(board, rng) is None:
        return board, session.ended(EndReason.BOARD_FULL)
    return board, session


# ---------- Update ----------
def advance_tick(
    board: Board,
    session: Session,
    direction: Direction,
    rng: random.Random,
    config: GameConfig,
) -> Tuple[Board, Session]:
    """
    Advance the game by one tick in `direction`.
    Inputs are never mutated. Collisions and a full board end the game through
    the returned session; they are not errors. A finished session is returned
    unchanged.
    """
    if session.is_game_over:
        return board, session

    nxt = board.copy()

    # 1) tail decay
    expired = nxt.age_snake_cells()

    # 2) candidate head
    hx, hy = session.head
    nx, ny = hx + direction.dx, hy + direction.dy

    # 3) bounds
    if not nxt.in_bounds(nx, ny):
        if config.boundary is Boundary.WRAP:
            nx, ny = nxt.wrap(nx, ny)
        else:
            logger.debug("Hit the wall moving %s from %s", direction.name, session.head)
            return board, session.ended(EndReason.WALL)

    # 4) self collision (the tail that just expired is free)
    target = nxt.cell_at(nx, ny)
    if target > 0:
        logger.debug("Ran into own body at %s", (nx, ny))
        return board, session.ended(EndReason.SELF)

    # 5) food
    length, score = session.length, session.score
    ate = target == FOOD
    if ate:
        score += length
        length += config.growth
        # the tail holds still this tick and every segment lives `growth` ticks longer
        nxt.extend_snake_cells(config.growth, revived=expired)

    # 6) new head
    nxt.set_cell(nx, ny, length)
    result = replace(
        session,
        length=length,
        head=(nx, ny),
        direction=direction,
        score=score,
        elapsed_ms=0.0,
        ticks=session.ticks + 1,
    )

    # 7) respawn food
    if ate and place_food_randomly(nxt, rng) is None:
        logger.debug("No room left for food, length=%d", length)
        return nxt, result.ended(EndReason.BOARD_FULL)

    # 8) win
    if length > nxt.size:
        return nxt, result.ended(EndReason.FILLED)

    return nxt, result
