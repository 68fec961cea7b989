import os
import random

import pytest

# pygame must never try to open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.board import Board
from gridsnake.config import FOOD


def make_board(width, height, body=None, food=None):
    """Board with `body` ({(x, y): tag}) and an optional food cell."""
    board = Board.create(width, height)
    for (x, y), tag in (body or {}).items():
        board.set_cell(x, y, tag)
    if food is not None:
        board.set_cell(food[0], food[1], FOOD)
    return board


@pytest.fixture
def rng():
    return random.Random(1234)
