import random

import pygame
import pytest

from gridsnake.config import BG, BUTTON, HEAD, PRIMARY_BUTTON, RED, EndReason, GameConfig
from gridsnake.engine import new_game
from gridsnake.loop import Snapshot
from gridsnake.render import PygameRenderer, cell_rect, result_regions, segment_scale
from gridsnake.ui import RegionStack


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 20)
    pygame.font.quit()


def color_at(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_segment_scale():
    assert segment_scale(4, 4) == 1.0
    assert segment_scale(2, 4) == 0.75
    assert segment_scale(1, 0) > 0


def test_renderer_draws_head_food_and_background(font):
    cfg = GameConfig(width=6, height=4)
    board, session = new_game(cfg, random.Random(5))
    snap = Snapshot.of(board, session)
    surface = pygame.Surface(cfg.window_size())

    PygameRenderer(surface, font)(snap)

    food = board.food_cells()[0]
    assert color_at(surface, cell_rect(*food).center) == RED
    assert color_at(surface, cell_rect(*session.head).center) == HEAD
    assert color_at(surface, (1, surface.get_height() - 2)) == BG
    assert not snap.board.flags.writeable


def test_renderer_draws_regions_over_the_board(font):
    cfg = GameConfig(width=6, height=4)
    board, session = new_game(cfg, random.Random(5))
    surface = pygame.Surface(cfg.window_size())
    regions = RegionStack()
    clicked = []
    for region in result_regions(surface.get_size(), lambda: clicked.append(True), font):
        regions.push(region)

    PygameRenderer(surface, font, regions)(Snapshot.of(board, session.ended(EndReason.WALL)))

    button = regions.regions[-1]
    assert color_at(surface, (int(button.x) + 4, int(button.y) + 4)) == BUTTON
    assert regions.dispatch(button.x + 1, button.y + 1, PRIMARY_BUTTON)
    assert clicked == [True]
    # clicks outside the button land on the popup and do nothing
    assert regions.dispatch(0, 0, PRIMARY_BUTTON)
    assert clicked == [True]
