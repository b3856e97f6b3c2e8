from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from maze_solver.utils.grid_core import ACTIONS, Position

if TYPE_CHECKING:
    from maze_solver.engine.maze import Maze  # pragma: no cover


def _endpoints(maze: "Maze", start: Optional[Position], end: Optional[Position]) -> Tuple[Position, Position]:
    return (maze.start if start is None else start, maze.end if end is None else end)


def depth_first_search(
    maze: "Maze",
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    order: Sequence[int] = ACTIONS,
) -> List[Position]:
    """Find the first path from ``start`` to ``end`` in depth-first order.

    Neighbors are tried in ``order`` (up, down, left, right by default) and a
    cell is marked visited before any of its neighbors is explored. The search
    keeps an explicit stack of ``[position, next action index]`` frames, so
    the stack itself is the current route and no recursion is involved.

    The returned path is the first one found under the neighbor order. It is
    not necessarily the shortest; see ``breadth_first_search`` for that.

    Args:
        maze: Maze to search.
        start: Start cell. Defaults to the maze's start marker.
        end: End cell. Defaults to the maze's end marker.
        order: Neighbor priority as a sequence of actions.

    Returns:
        Positions from start to end inclusive, or an empty list if the end
        cannot be reached (including when either endpoint is a wall or out of
        bounds).
    """
    start, end = _endpoints(maze, start, end)
    if maze.rows == 0 or maze.cols == 0:
        return []
    if not (maze.is_open_at(start) and maze.is_open_at(end)):
        return []

    visited = np.zeros((maze.rows, maze.cols), dtype=bool)
    visited[start.row, start.col] = True
    stack: List[List] = [[start, 0]]

    while stack:
        frame = stack[-1]
        cur, i = frame
        if cur == end:
            return [f[0] for f in stack]
        if i == len(order):
            stack.pop()
            continue
        frame[1] = i + 1
        nxt = cur.step(order[i])
        if maze.is_open_at(nxt) and not visited[nxt.row, nxt.col]:
            visited[nxt.row, nxt.col] = True
            stack.append([nxt, 0])
    return []


def depth_first_search_recursive(
    maze: "Maze",
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    order: Sequence[int] = ACTIONS,
) -> List[Position]:
    """Recursive form of ``depth_first_search``; returns the same path.

    The route is collected end-first while the recursion unwinds and reversed
    at the end. Recursion depth grows with the number of open cells, so this
    is only suitable for small mazes.
    """
    start, end = _endpoints(maze, start, end)
    if maze.rows == 0 or maze.cols == 0:
        return []
    if not (maze.is_open_at(start) and maze.is_open_at(end)):
        return []

    visited = np.zeros((maze.rows, maze.cols), dtype=bool)
    path: List[Position] = []

    def visit(cur: Position) -> bool:
        if cur == end:
            path.append(cur)
            return True
        visited[cur.row, cur.col] = True
        for a in order:
            nxt = cur.step(a)
            if maze.is_open_at(nxt) and not visited[nxt.row, nxt.col]:
                if visit(nxt):
                    path.append(cur)
                    return True
        return False

    if visit(start):
        path.reverse()
    return path
