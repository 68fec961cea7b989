# src/gridsnake/loop.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional
import logging
import random

import numpy as np  # type: ignore

from .board import Board
from .config import Direction, EndReason, GameConfig
from .engine import Session, advance_tick, new_game
from .latch import InputLatch
from .rng import make_rng
from .ui import RegionStack

logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""
    board: np.ndarray
    score: int
    length: int
    is_game_over: bool
    is_win: bool
    end_reason: Optional[EndReason]
    ticks: int

    @classmethod
    def of(cls, board: Board, session: Session) -> "Snapshot":
        grid = board.grid.copy()
        grid.flags.writeable = False
        return cls(
            board=grid,
            score=session.score,
            length=session.length,
            is_game_over=session.is_game_over,
            is_win=session.is_win,
            end_reason=session.end_reason,
            ticks=session.ticks,
        )


Renderer = Callable[[Snapshot], None]


class GameLoop:
    """
    Runs the simulation at a fixed tick rate while the host calls `frame()` at
    whatever rate it renders. At most one tick fires per frame; leftover time
    past the tick interval is dropped.
    """

    def __init__(
        self,
        config: GameConfig,
        renderer: Optional[Renderer] = None,
        on_end: Optional[Callable[[Snapshot], None]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.renderer = renderer
        self.on_end = on_end
        self.rng = rng if rng is not None else make_rng(config.seed)
        self.regions = RegionStack()
        self.state = LoopState.IDLE
        self.board: Optional[Board] = None
        self.session: Optional[Session] = None
        self.latch: Optional[InputLatch] = None
        self.games_played = 0

    # ---------- Lifecycle ----------
    def start(self) -> None:
        """Build a fresh game and start running. Also used for restarts."""
        self.board, self.session = new_game(self.config, self.rng)
        self.latch = InputLatch(self.session.direction)
        self.regions.clear()
        self.state = LoopState.RUNNING
        self.games_played += 1
        logger.info(
            "Game %d started on a %dx%d board (tick=%dms, boundary=%s)",
            self.games_played, self.config.width, self.config.height,
            self.config.tick_ms, self.config.boundary.value,
        )
        if self.session.is_game_over:
            self._finish()

    def restart(self) -> None:
        self.start()

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    # ---------- Input ----------
    def on_direction(self, direction: Direction) -> None:
        if self.running:
            self.latch.record_direction(direction)

    def on_pointer_down(self, x: float, y: float, button: int) -> bool:
        return self.regions.dispatch(x, y, button)

    # ---------- Frame ----------
    def snapshot(self) -> Optional[Snapshot]:
        if self.board is None or self.session is None:
            return None
        return Snapshot.of(self.board, self.session)

    def tick(self) -> None:
        """Run exactly one simulation step with the latched direction."""
        if not self.running:
            return
        direction = self.latch.consume_latched()
        self.board, self.session = advance_tick(
            self.board, self.session, direction, self.rng, self.config
        )
        if self.session.is_game_over:
            self._finish()

    def frame(self, delta_ms: float) -> Optional[Snapshot]:
        """Called once per render opportunity with the real time since the last one."""
        if self.state is LoopState.IDLE:
            return None

        if self.running:
            elapsed = self.session.elapsed_ms + delta_ms
            self.session = replace(self.session, elapsed_ms=elapsed)
            if elapsed > self.config.tick_ms:
                self.tick()

        snap = self.snapshot()
        if self.renderer is not None:
            self.renderer(snap)
        return snap

    def _finish(self) -> None:
        self.state = LoopState.TERMINAL
        s = self.session
        logger.info(
            "Game %d over: %s (%s) score=%d length=%d ticks=%d",
            self.games_played, "win" if s.is_win else "loss",
            s.end_reason.value, s.score, s.length, s.ticks,
        )
        if self.on_end is not None:
            self.on_end(self.snapshot())
