from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from maze_solver.engine.maze import Maze
from maze_solver.utils.grid_core import DOWN, LEFT, RIGHT, UP, Position, action_between

STYLES = ("char", "arrows")
ARROWS: Dict[int, str] = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}


@dataclass(frozen=True)
class RenderCfg:
    mark: str = "*"
    style: str = "char"  # "char" or "arrows"


def render_path(maze: Maze, path: Sequence[Position], cfg: Optional[RenderCfg] = None) -> Maze:
    """Overlay ``path`` on ``maze`` in place and return the maze.

    - ``style == "char"``: every passage cell on the path becomes ``cfg.mark``.
    - ``style == "arrows"``: every passage cell on the path except the last
      shows the direction of the next step (``^``, ``v``, ``<``, ``>``).

    Start, end and wall cells are never overwritten. An empty path leaves the
    maze untouched; reporting "no path" is the caller's job.

    Raises:
        ValueError: If ``cfg.style`` is unknown or ``path`` has a non-adjacent step.
    """
    cfg = cfg or RenderCfg()
    if cfg.style not in STYLES:
        raise ValueError(f"unknown render style '{cfg.style}', expected one of {STYLES}")
    if not path:
        return maze
    if cfg.style == "char":
        maze.mark_path(path, cfg.mark)
    else:
        for cur, nxt in zip(path, path[1:]):
            maze.set_if_passage(cur, ARROWS[action_between(cur, nxt)])
    return maze
