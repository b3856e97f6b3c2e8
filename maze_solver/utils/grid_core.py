from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Actions, also the neighbor priority used by the searches: 0:UP, 1:DOWN, 2:LEFT, 3:RIGHT
UP, DOWN, LEFT, RIGHT = 0, 1, 2, 3
ACTIONS = (UP, DOWN, LEFT, RIGHT)

# (d_row, d_col) for each action, indexed by the action value
MOVES: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Position:
    """A single grid cell.

    Attributes:
        row: Zero-based row index (line number in the maze file).
        col: Zero-based column index (character offset in the line).
    """
    row: int
    col: int

    def moved(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)

    def step(self, action: int) -> "Position":
        """Neighbor reached by applying ``action`` (one of ``ACTIONS``)."""
        d_row, d_col = MOVES[action]
        return self.moved(d_row, d_col)


def action_between(a: Position, b: Position) -> int:
    """Return the action that moves from ``a`` to the 4-adjacent cell ``b``.

    Raises:
        ValueError: If ``b`` is not one of the four neighbors of ``a``.
    """
    delta = (b.row - a.row, b.col - a.col)
    try:
        return MOVES.index(delta)
    except ValueError:
        raise ValueError(f"{b} is not adjacent to {a}") from None
