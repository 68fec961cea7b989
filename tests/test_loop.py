import random

import pytest

from gridsnake.config import PRIMARY_BUTTON, Direction, EndReason, GameConfig
from gridsnake.loop import GameLoop, LoopState, Snapshot
from gridsnake.ui import Region


def make_loop(**overrides):
    frames = []
    ended = []
    cfg = GameConfig(**{"width": 9, "height": 9, "tick_ms": 100, **overrides})
    game = GameLoop(cfg, renderer=frames.append, on_end=ended.append, rng=random.Random(3))
    return game, frames, ended


def test_idle_loop_does_nothing():
    game, frames, _ = make_loop()
    assert game.state is LoopState.IDLE
    assert game.frame(500) is None
    assert frames == []


def test_ticks_only_after_the_interval_elapses():
    game, frames, _ = make_loop()
    game.start()
    head = game.session.head

    game.frame(60)
    assert game.session.ticks == 0
    assert game.session.elapsed_ms == 60

    game.frame(40)  # exactly tick_ms is not enough
    assert game.session.ticks == 0

    snap = game.frame(1)
    assert game.session.ticks == 1
    assert game.session.elapsed_ms == 0
    assert game.session.head == (head[0] + 1, head[1])
    assert snap.ticks == 1
    assert len(frames) == 3


def test_long_frame_fires_a_single_tick():
    game, _, _ = make_loop()
    game.start()
    game.frame(1000)
    assert game.session.ticks == 1
    assert game.session.elapsed_ms == 0


def test_direction_is_applied_at_the_next_tick():
    game, _, _ = make_loop()
    game.start()
    hx, hy = game.session.head

    game.on_direction(Direction.SOUTH)
    game.on_direction(Direction.WEST)  # reverse of EAST, ignored
    game.frame(101)

    assert game.session.direction is Direction.SOUTH
    assert game.session.head == (hx, hy + 1)


def test_wall_ends_the_game_and_stops_ticking():
    game, frames, ended = make_loop(width=3, height=3)
    game.start()

    game.frame(101)
    game.frame(101)

    assert game.state is LoopState.TERMINAL
    assert game.session.is_game_over and not game.session.is_win
    assert game.session.end_reason is EndReason.WALL
    assert len(ended) == 1 and ended[0].is_game_over

    ticks = game.session.ticks
    snap = game.frame(500)
    assert game.session.ticks == ticks
    assert snap.is_game_over
    assert len(frames) == 3

    game.on_direction(Direction.NORTH)
    assert game.latch.latched is Direction.EAST


def test_restart_replaces_everything():
    game, _, _ = make_loop(width=3, height=3)
    game.start()
    game.frame(101)
    game.frame(101)
    game.regions.push(Region(0, 0, 10, 10, clickable=True))
    assert game.state is LoopState.TERMINAL

    game.restart()

    assert game.state is LoopState.RUNNING
    assert game.session.ticks == 0
    assert not game.session.is_game_over
    assert len(game.regions) == 0
    assert game.games_played == 2


def test_pointer_down_reaches_regions():
    game, _, _ = make_loop(width=3, height=3)
    game.start()
    game.frame(101)
    game.frame(101)
    game.regions.push(Region(0, 0, 50, 20, on_primary=game.restart))

    assert not game.on_pointer_down(80, 80, PRIMARY_BUTTON)
    assert game.state is LoopState.TERMINAL
    assert game.on_pointer_down(50, 20, PRIMARY_BUTTON)
    assert game.state is LoopState.RUNNING


def test_snapshot_is_read_only():
    game, _, _ = make_loop()
    game.start()
    snap = game.snapshot()
    assert isinstance(snap, Snapshot)
    with pytest.raises(ValueError):
        snap.board[0, 0] = 5
    assert snap.length == game.session.length
    assert snap.board[game.session.head[1], game.session.head[0]] == snap.length


def test_seeded_loops_play_the_same_game():
    a = GameLoop(GameConfig(seed=11))
    b = GameLoop(GameConfig(seed=11))
    a.start()
    b.start()
    assert a.board == b.board


def test_tick_before_start_is_a_no_op():
    game, frames, ended = make_loop()
    game.tick()
    assert game.state is LoopState.IDLE
    assert game.session is None
    assert ended == []


def test_tick_after_the_game_ended_is_a_no_op():
    game, _, _ = make_loop(width=3, height=3)
    game.start()
    game.frame(101)
    game.frame(101)
    ticks = game.session.ticks

    game.tick()
    assert game.session.ticks == ticks
    assert game.state is LoopState.TERMINAL


def test_start_on_a_board_the_snake_already_fills():
    game, frames, ended = make_loop(width=2, height=1, start_length=2)
    game.start()

    assert game.state is LoopState.TERMINAL
    assert game.session.is_win
    assert game.session.end_reason is EndReason.BOARD_FULL
    assert len(ended) == 1 and ended[0].is_win

    game.frame(500)
    assert game.session.ticks == 0
