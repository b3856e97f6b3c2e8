from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Sequence, TYPE_CHECKING

import numpy as np

from maze_solver.utils.grid_core import ACTIONS, Position

if TYPE_CHECKING:
    from maze_solver.engine.maze import Maze  # pragma: no cover


def breadth_first_search(
    maze: "Maze",
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    order: Sequence[int] = ACTIONS,
) -> List[Position]:
    """Find a shortest path from ``start`` to ``end``.

    Cells are expanded layer by layer from the start, trying neighbors in
    ``order``. Each cell's parent is recorded the first time it is reached and
    never changed afterwards. Expansion stops once the end is dequeued, then
    the path is rebuilt by following parents back from the end.

    Args:
        maze: Maze to search.
        start: Start cell. Defaults to the maze's start marker.
        end: End cell. Defaults to the maze's end marker.
        order: Neighbor priority as a sequence of actions.

    Returns:
        Positions from start to end inclusive with the fewest cells possible,
        or an empty list if the end cannot be reached.
    """
    start = maze.start if start is None else start
    end = maze.end if end is None else end
    if maze.rows == 0 or maze.cols == 0:
        return []
    if not (maze.is_open_at(start) and maze.is_open_at(end)):
        return []

    shape = (maze.rows, maze.cols)
    visited = np.zeros(shape, dtype=bool)
    parent_row = np.full(shape, -1, dtype=np.int64)
    parent_col = np.full(shape, -1, dtype=np.int64)

    visited[start.row, start.col] = True
    queue: Deque[Position] = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == end:
            break
        for a in order:
            nxt = cur.step(a)
            if maze.is_open_at(nxt) and not visited[nxt.row, nxt.col]:
                visited[nxt.row, nxt.col] = True
                parent_row[nxt.row, nxt.col] = cur.row
                parent_col[nxt.row, nxt.col] = cur.col
                queue.append(nxt)

    if not visited[end.row, end.col]:
        return []
    path = [end]
    at = end
    while at != start:
        at = Position(int(parent_row[at.row, at.col]), int(parent_col[at.row, at.col]))
        path.append(at)
    path.reverse()
    return path
