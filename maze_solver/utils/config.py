from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from maze_solver.agents.planning.maze_planning import DFS_VARIANTS
from maze_solver.engine.maze import MazeSymbols
from maze_solver.engine.path_renderer import STYLES, RenderCfg

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG = ROOT / "config" / "solver.json"


def load_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _single_char(key: str, value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"config '{key}' must be a single character, got {value!r}")
    return value


@dataclass
class SolverConfig:
    """Settings for one solver run.

    Attributes:
        symbols: Tile characters used to parse the maze.
        render: Path marker character and style.
        dfs_variant: ``"iterative"`` (explicit stack) or ``"recursive"``.
        strict_markers: If True, duplicated ``S``/``E`` markers are an error.
    """
    symbols: MazeSymbols = field(default_factory=MazeSymbols)
    render: RenderCfg = field(default_factory=RenderCfg)
    dfs_variant: str = "iterative"
    strict_markers: bool = True

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SolverConfig":
        """Build a config from parsed JSON.

        Recognized keys: ``symbols`` (``wall``, ``start``, ``end``,
        ``passages``), ``mark``, ``style``, ``dfs_variant`` and
        ``strict_markers``. Missing keys keep their defaults.

        Raises:
            ValueError: If ``data`` is not an object, a symbol or the mark is
                not a single character, or a value is not one of its choices.
        """
        if not isinstance(data, dict):
            raise ValueError(f"config must be a JSON object, got {type(data).__name__}")
        defaults = MazeSymbols()
        sym = data.get("symbols", {})
        if not isinstance(sym, dict):
            raise ValueError("config 'symbols' must be a JSON object")
        passages = sym.get("passages", defaults.passages)
        if not isinstance(passages, (list, tuple)):
            raise ValueError("config 'symbols.passages' must be a list")
        symbols = MazeSymbols(
            wall=_single_char("symbols.wall", sym.get("wall", defaults.wall)),
            start=_single_char("symbols.start", sym.get("start", defaults.start)),
            end=_single_char("symbols.end", sym.get("end", defaults.end)),
            passages=tuple(_single_char("symbols.passages", p) for p in passages),
        )
        render = RenderCfg(
            mark=_single_char("mark", data.get("mark", "*")),
            style=data.get("style", "char"),
        )
        if render.style not in STYLES:
            raise ValueError(f"unknown render style '{render.style}' in config")
        dfs_variant = data.get("dfs_variant", "iterative")
        if not isinstance(dfs_variant, str) or dfs_variant not in DFS_VARIANTS:
            raise ValueError(f"unknown dfs variant '{dfs_variant}' in config")
        strict_markers = data.get("strict_markers", True)
        if not isinstance(strict_markers, bool):
            raise ValueError("config 'strict_markers' must be true or false")
        return SolverConfig(
            symbols=symbols,
            render=render,
            dfs_variant=dfs_variant,
            strict_markers=strict_markers,
        )

    @staticmethod
    def from_json(path: Optional[Path] = None) -> "SolverConfig":
        """Load a config file.

        With no ``path`` the bundled ``config/solver.json`` is used when
        present and built-in defaults otherwise. An explicit ``path`` that
        does not exist raises ``FileNotFoundError``.
        """
        if path is None:
            if not DEFAULT_CONFIG.exists():
                return SolverConfig()
            path = DEFAULT_CONFIG
        return SolverConfig.from_dict(load_json(Path(path)))
