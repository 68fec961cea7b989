# src/gridsnake/render.py
from typing import Callable, List, Optional, Tuple
import pygame # type: ignore

from .config import (
    CELL_SIZE, BOARD_OFFSET,
    BG, BORDER, PURPLE, HEAD, RED, TEXT, BUTTON,
    FOOD,
)
from .loop import Snapshot
from .ui import Region, RegionStack

# ---------- Helpers ----------
def cell_rect(gx: int, gy: int, scale: float = 1.0) -> pygame.Rect:
    """Pixel rect of a grid cell, shrunk around its centre by `scale`."""
    size = CELL_SIZE * scale
    ox, oy = BOARD_OFFSET
    left = ox + gx * CELL_SIZE + (CELL_SIZE - size) / 2
    top = oy + gy * CELL_SIZE + (CELL_SIZE - size) / 2
    return pygame.Rect(round(left), round(top), round(size), round(size))

def segment_scale(tag: int, length: int) -> float:
    # fresh segments (near the head) are drawn full size, the tail at half size
    return (tag / max(length, 1)) / 2 + 0.5

def draw_text(surface: pygame.Surface, font: pygame.font.Font, text: str,
              center: Tuple[int, int], color=TEXT) -> None:
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=center))


# ---------- Board / HUD ----------
def draw_board(surface: pygame.Surface, snap: Snapshot) -> None:
    grid = snap.board
    head_tag = int(grid.max()) if grid.size else 0
    height, width = grid.shape
    for gy in range(height):
        for gx in range(width):
            tag = int(grid[gy, gx])
            if tag == FOOD:
                pygame.draw.rect(surface, RED, cell_rect(gx, gy))
            elif tag > 0:
                color = HEAD if tag == head_tag else PURPLE
                pygame.draw.rect(surface, color, cell_rect(gx, gy, segment_scale(tag, snap.length)))

    ox, oy = BOARD_OFFSET
    pygame.draw.rect(surface, BORDER, pygame.Rect(ox, oy, width * CELL_SIZE, height * CELL_SIZE), 2)

def draw_hud(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    txt = font.render(f"Score: {snap.score}   Length: {snap.length}", True, TEXT)
    surface.blit(txt, (BOARD_OFFSET[0], 16))

def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    # Dim with translucent overlay
    w, h = surface.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    surface.blit(overlay, (0, 0))

    title = "You win!" if snap.is_win else "You lose!"
    draw_text(surface, font, title, (w // 2, h // 2 - 40), (240, 240, 250))
    draw_text(surface, font, f"Score: {snap.score}", (w // 2, h // 2 - 12))
    draw_text(surface, font, "Press R to restart", (w // 2, h // 2 + 60))


# ---------- Widgets ----------
def make_button(x: float, y: float, width: float, height: float, text: str,
                action: Callable[[], None], font: pygame.font.Font) -> Region:
    """A clickable box that runs `action` on a primary click."""
    def draw(surface: pygame.Surface) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        pygame.draw.rect(surface, BUTTON, rect)
        pygame.draw.rect(surface, (0, 0, 0), rect, 2)
        draw_text(surface, font, text, rect.center, (255, 255, 255))

    return Region(x, y, width, height, draw=draw, on_primary=action)

def result_regions(window: Tuple[int, int], on_play_again: Callable[[], None],
                   font: pygame.font.Font) -> List[Region]:
    """
    Full-screen popup that swallows clicks, topped by a "Play Again" button.
    Pushed in order, so the button sits above the popup.
    """
    w, h = window
    popup = Region(0, 0, w, h, clickable=True)
    button = make_button(w * 0.35, h / 2 + 8, w * 0.3, 36, "Play Again", on_play_again, font)
    return [popup, button]


# ---------- Adapter ----------
class PygameRenderer:
    """Draws a snapshot and the UI regions on top of it. Never mutates the snapshot."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font,
                 regions: Optional[RegionStack] = None):
        self.screen = screen
        self.font = font
        self.regions = regions

    def __call__(self, snap: Optional[Snapshot]) -> None:
        self.screen.fill(BG)
        if snap is None:
            return
        draw_board(self.screen, snap)
        draw_hud(self.screen, self.font, snap)
        if snap.is_game_over:
            draw_game_over(self.screen, self.font, snap)
        if self.regions is not None:
            self.regions.draw_all(self.screen)
