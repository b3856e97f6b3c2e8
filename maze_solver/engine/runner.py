from __future__ import annotations

"""Command-line pipeline: load a maze, search it, write or print the result.

Exit status is 0 on success and when no path exists, 1 for any error.
"""

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from maze_solver.agents.planning.maze_planning import get_strategy
from maze_solver.engine.maze import Maze
from maze_solver.engine.path_renderer import STYLES, render_path
from maze_solver.utils.config import DEFAULT_CONFIG, SolverConfig
from maze_solver.utils.errors import ConfigError, FileOpenError, MazeError, NoPathFound, UsageError


class _ArgParser(argparse.ArgumentParser):
    # argparse exits with status 2 on bad arguments; report a UsageError instead.
    def error(self, message: str):
        raise UsageError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgParser(
        prog=prog,
        usage="%(prog)s <input_maze.txt> <dfs|bfs> [output_maze.txt] [options]",
        description="Find a path from S to E in a text maze with depth-first or breadth-first search.",
    )
    parser.add_argument("input", help="Maze file: '#' walls, ' ' or '.' passages, 'S' start, 'E' end")
    parser.add_argument("method", help="Search method: dfs or bfs")
    parser.add_argument("output", nargs="?", default=None, help="Write the solved maze here instead of stdout")
    # Positionals after the output file are accepted and ignored.
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("--config", type=Path, default=None, help="JSON config file (default: config/solver.json)")
    parser.add_argument("--mark", type=_single_char, default=None, help="Path marker character (default: '*')")
    parser.add_argument("--style", choices=STYLES, default=None, help="Draw the path with the marker or with arrows")
    parser.add_argument("--verbose", action="store_true", help="Print a short summary on stderr")
    return parser


def _load_config(args: argparse.Namespace) -> SolverConfig:
    source = args.config or DEFAULT_CONFIG
    try:
        cfg = SolverConfig.from_json(args.config)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FileOpenError(f"cannot load config {source}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"invalid config {source}: {exc}") from exc
    overrides = {}
    if args.mark is not None:
        overrides["mark"] = args.mark
    if args.style is not None:
        overrides["style"] = args.style
    cfg.render = replace(cfg.render, **overrides)
    return cfg


def solve_file(args: argparse.Namespace) -> None:
    """Run the load -> search -> render -> output pipeline for parsed ``args``.

    Raises:
        NoPathFound: If the end cannot be reached.
        MazeError: For unreadable input, unknown method, missing markers or
            an unwritable output file.
    """
    cfg = _load_config(args)
    maze = Maze.load(args.input, symbols=cfg.symbols, strict_markers=cfg.strict_markers)
    strategy = get_strategy(args.method, cfg.dfs_variant)
    path = strategy(maze)
    if args.verbose:
        print(f"{args.method}: {maze.rows}x{maze.cols} maze, path of {len(path)} cells", file=sys.stderr)
    if not path:
        raise NoPathFound()

    render_path(maze, path, cfg.render)
    if args.output:
        maze.save(args.output)
        print(f"Solution saved to {args.output}")
    else:
        maze.print()


def run(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    """Parse ``argv``, solve, and return the process exit status."""
    parser = build_parser(prog)
    try:
        args = parser.parse_args(argv)
        solve_file(args)
    except NoPathFound as exc:
        print(exc)
        return exc.exit_code
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    except MazeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


def main() -> None:
    raise SystemExit(run())
