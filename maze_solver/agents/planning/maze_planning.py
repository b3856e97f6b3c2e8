from __future__ import annotations

from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from maze_solver.agents.bfs import breadth_first_search
from maze_solver.agents.dfs import depth_first_search, depth_first_search_recursive
from maze_solver.utils.errors import UnknownMethodError
from maze_solver.utils.grid_core import Position

if TYPE_CHECKING:
    from maze_solver.engine.maze import Maze  # pragma: no cover

Strategy = Callable[..., List[Position]]

METHODS = ("dfs", "bfs")
DFS_VARIANTS: Dict[str, Strategy] = {
    "iterative": depth_first_search,
    "recursive": depth_first_search_recursive,
}


def get_strategy(method: str, dfs_variant: str = "iterative") -> Strategy:
    """Return the search function registered under ``method``.

    Args:
        method: Exactly ``"dfs"`` or ``"bfs"`` (case-sensitive).
        dfs_variant: ``"iterative"`` or ``"recursive"``; only used for dfs.

    Raises:
        UnknownMethodError: If ``method`` is not a known name.
        ValueError: If ``dfs_variant`` is not a known variant.
    """
    if method == "bfs":
        return breadth_first_search
    if method == "dfs":
        try:
            return DFS_VARIANTS[dfs_variant]
        except KeyError:
            raise ValueError(f"unknown dfs variant '{dfs_variant}'") from None
    raise UnknownMethodError(method)


def solve(
    maze: "Maze",
    method: str,
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    dfs_variant: str = "iterative",
) -> List[Position]:
    """Run the ``method`` search on ``maze``; empty list when there is no path."""
    return get_strategy(method, dfs_variant)(maze, start, end)


def path_is_valid(maze: "Maze", path: List[Position], start: Position, end: Position) -> bool:
    """Check that ``path`` walks 4-adjacent open cells from start to end without repeats."""
    if not path:
        return False
    if path[0] != start or path[-1] != end:
        return False
    if len(set(path)) != len(path):
        return False
    if not all(maze.is_open_at(p) for p in path):
        return False
    return all(abs(a.row - b.row) + abs(a.col - b.col) == 1 for a, b in zip(path, path[1:]))
