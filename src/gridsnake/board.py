# src/gridsnake/board.py
from __future__ import annotations
from typing import List, Optional, Tuple

import numpy as np  # type: ignore

from .config import EMPTY, FOOD

Cell = Tuple[int, int]


class OutOfBounds(IndexError):
    """Raised on direct cell access outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"cell ({x}, {y}) is outside a {width}x{height} board")
        self.x = x
        self.y = y


class Board:
    """
    W x H grid of integer tags:
      0   empty
      -1  food
      n>0 snake segment with n ticks of life left (the head holds the maximum)

    Stored as a numpy array of shape (H, W) and addressed as (x, y), (0, 0) top left.
    """

    def __init__(self, grid: np.ndarray):
        self.grid = grid

    @classmethod
    def create(cls, width: int, height: int) -> "Board":
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        return cls(np.zeros((height, width), dtype=np.int32))

    # ---------- Geometry ----------
    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def size(self) -> int:
        return int(self.grid.size)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> Cell:
        """Map any coordinate onto the torus."""
        return (x % self.width, y % self.height)

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    # ---------- Cell access ----------
    def cell_at(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, tag: int) -> None:
        self._check(x, y)
        if tag < FOOD:
            raise ValueError(f"invalid cell tag {tag}")
        self.grid[y, x] = tag

    # ---------- Snake bookkeeping ----------
    def age_snake_cells(self) -> np.ndarray:
        """
        Decrement every snake segment by one tick. Segments reaching 0 become
        empty, which is how the tail shrinks. Returns the mask of expired cells.
        """
        body = self.grid > 0
        expired = self.grid == 1
        self.grid[body] -= 1
        return expired

    def extend_snake_cells(self, amount: int, revived: Optional[np.ndarray] = None) -> None:
        """Add `amount` ticks of life to every segment (and to `revived` cells)."""
        body = self.grid > 0
        if revived is not None:
            body |= revived
        self.grid[body] += amount

    # ---------- Queries ----------
    def empty_cells(self) -> List[Cell]:
        ys, xs = np.nonzero(self.grid == EMPTY)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def food_cells(self) -> List[Cell]:
        ys, xs = np.nonzero(self.grid == FOOD)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def body_count(self) -> int:
        return int(np.count_nonzero(self.grid > 0))

    def head_tag(self) -> int:
        return max(int(self.grid.max()), 0)

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    def render_rows(self, head: Optional[Cell] = None) -> List[str]:
        """Text view of the board: '.' empty, '*' food, 'o' body, '@' head."""
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                tag = int(self.grid[y, x])
                if head is not None and (x, y) == head and tag > 0:
                    row.append("@")
                elif tag > 0:
                    row.append("o")
                elif tag == FOOD:
                    row.append("*")
                else:
                    row.append(".")
            rows.append("".join(row))
        return rows

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __repr__(self):
        return f"<Board {self.width}x{self.height} body={self.body_count()} food={self.food_cells()}>"
