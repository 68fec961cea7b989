# src/gridsnake/config.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Window & grid -----
CELL_SIZE = 30
BOARD_OFFSET = (20, 60)   # top-left corner of the board in pixels
HUD_HEIGHT = 40
FPS = 60

# ----- Colors -----
BG     = (20, 20, 24)
BORDER = (90, 90, 100)
PURPLE = (102, 51, 153)
HEAD   = (150, 90, 210)
RED    = (200, 70, 70)
TEXT   = (220, 220, 230)
BUTTON = (0, 0, 153)

# ----- Mouse buttons (pygame numbering) -----
PRIMARY_BUTTON = 1
SECONDARY_BUTTON = 3

# ----- Cell tags -----
EMPTY = 0
FOOD = -1


# ----- Directions (dx, dy), y grows downwards -----
class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.dx == -b.dx and a.dy == -b.dy


class Boundary(Enum):
    """What happens when the head leaves the grid."""
    WALL = "wall"   # off-grid movement loses the game
    WRAP = "wrap"   # the head re-enters on the opposite edge


class EndReason(Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"
    FILLED = "filled"

    @property
    def is_win(self) -> bool:
        return self in (EndReason.BOARD_FULL, EndReason.FILLED)


# ----- Tunables -----
@dataclass
class GameConfig:
    width: int = 15
    height: int = 10
    start_length: int = 2
    growth: int = 1
    tick_ms: int = 150
    boundary: Boundary = Boundary.WALL
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")
        if self.start_length < 1:
            raise ValueError(f"start_length must be positive, got {self.start_length}")
        # the starting body is laid out westward from the centre column
        if self.start_length > self.width // 2 + 1:
            raise ValueError(
                f"start_length {self.start_length} does not fit a board {self.width} wide"
            )
        if self.growth < 1:
            raise ValueError(f"growth must be positive, got {self.growth}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def window_size(self):
        """Pixel size of a window that fits the board plus the HUD."""
        ox, oy = BOARD_OFFSET
        return (
            self.width * CELL_SIZE + 2 * ox,
            self.height * CELL_SIZE + oy + ox,
        )
