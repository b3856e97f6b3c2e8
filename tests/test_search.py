"""Tests for the depth-first and breadth-first searches."""

import numpy as np
import pytest

from maze_solver.agents.bfs import breadth_first_search
from maze_solver.agents.dfs import depth_first_search, depth_first_search_recursive
from maze_solver.agents.planning.maze_planning import get_strategy, path_is_valid, solve
from maze_solver.engine.maze import Maze
from maze_solver.utils.errors import MissingMarkerError, UnknownMethodError
from maze_solver.utils.grid_core import DOWN, LEFT, RIGHT, UP, Position

SEARCHES = [breadth_first_search, depth_first_search, depth_first_search_recursive]


def P(row: int, col: int) -> Position:
    return Position(row, col)


def shortest_length(maze: Maze, start: Position, end: Position) -> int:
    """Cell count of a shortest path by repeated relaxation, or 0 if unreachable."""
    inf = maze.rows * maze.cols + 1
    dist = np.full((maze.rows, maze.cols), inf, dtype=np.int64)
    dist[start.row, start.col] = 0
    changed = True
    while changed:
        changed = False
        for r in range(maze.rows):
            for c in range(maze.cols):
                if not maze.is_open(r, c):
                    continue
                for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                    nr, nc = r + dr, c + dc
                    if maze.is_open(nr, nc) and dist[nr, nc] + 1 < dist[r, c]:
                        dist[r, c] = dist[nr, nc] + 1
                        changed = True
    d = int(dist[end.row, end.col])
    return 0 if d >= inf else d + 1


def random_maze(rng: np.random.Generator, rows: int, cols: int, wall_p: float) -> Maze:
    cells = np.where(rng.random((rows, cols)) < wall_p, "#", ".")
    cells[0, 0] = "S"
    cells[rows - 1, cols - 1] = "E"
    return Maze.from_text("\n".join("".join(row) for row in cells))


class TestScenarios:
    def test_single_route(self) -> None:
        maze = Maze.from_text("S.#\n.#.\n..E\n")
        expected = [P(0, 0), P(1, 0), P(2, 0), P(2, 1), P(2, 2)]
        for search in SEARCHES:
            assert search(maze) == expected

    @pytest.mark.parametrize("search", SEARCHES)
    def test_wall_between_start_and_end(self, search) -> None:
        assert search(Maze.from_text("S#E\n")) == []

    @pytest.mark.parametrize("search", SEARCHES)
    def test_disconnected(self, search) -> None:
        maze = Maze.from_text("S.#..\n..#..\n###.E\n")
        assert search(maze) == []

    @pytest.mark.parametrize("search", SEARCHES)
    def test_start_equals_end(self, search) -> None:
        maze = Maze.from_text("S.\n.E\n")
        assert search(maze, P(0, 1), P(0, 1)) == [P(0, 1)]

    @pytest.mark.parametrize("search", SEARCHES)
    def test_endpoint_on_wall_or_outside(self, search) -> None:
        maze = Maze.from_text("S.#\n..E\n")
        assert search(maze, P(0, 0), P(0, 2)) == []
        assert search(maze, P(0, 2), P(1, 2)) == []
        assert search(maze, P(0, 0), P(7, 7)) == []
        assert search(maze, P(-1, 0), P(1, 2)) == []
        assert search(maze, P(0, 2), P(0, 2)) == []

    @pytest.mark.parametrize("search", SEARCHES)
    def test_zero_rows_or_columns(self, search) -> None:
        assert search(Maze.from_text(""), P(0, 0), P(0, 0)) == []
        assert search(Maze.from_text("\n\n"), P(0, 0), P(1, 0)) == []

    @pytest.mark.parametrize("search", SEARCHES)
    def test_missing_marker(self, search) -> None:
        with pytest.raises(MissingMarkerError):
            search(Maze.from_text("S\n"))

    @pytest.mark.parametrize("search", SEARCHES)
    def test_ragged_rows(self, search) -> None:
        maze = Maze.from_text("S..\n.\n..E\n")
        path = search(maze)
        assert path_is_valid(maze, path, maze.start, maze.end)
        assert P(1, 2) not in path


class TestDepthFirst:
    OPEN_ROOM = "S..\n...\n..E\n"

    def test_follows_neighbor_order(self) -> None:
        # down first, then right, then up as far as possible
        maze = Maze.from_text(self.OPEN_ROOM)
        assert depth_first_search(maze) == [
            P(0, 0), P(1, 0), P(2, 0), P(2, 1), P(1, 1), P(0, 1), P(0, 2), P(1, 2), P(2, 2),
        ]

    def test_not_necessarily_shortest(self) -> None:
        maze = Maze.from_text(self.OPEN_ROOM)
        assert len(depth_first_search(maze)) > len(breadth_first_search(maze))

    def test_custom_order(self) -> None:
        maze = Maze.from_text(self.OPEN_ROOM)
        assert depth_first_search(maze, order=(RIGHT, DOWN, LEFT, UP)) == [
            P(0, 0), P(0, 1), P(0, 2), P(1, 2), P(2, 2),
        ]

    def test_recursive_matches_iterative(self) -> None:
        rng = np.random.default_rng(7)
        for _ in range(40):
            maze = random_maze(rng, 8, 11, 0.3)
            assert depth_first_search(maze) == depth_first_search_recursive(maze)

    def test_long_corridor_does_not_recurse(self) -> None:
        # a serpentine far deeper than the default recursion limit
        width, rows = 60, 61
        lines = []
        for r in range(rows):
            if r % 2 == 0:
                lines.append("." * width)
            elif r % 4 == 1:
                lines.append("#" * (width - 1) + ".")
            else:
                lines.append("." + "#" * (width - 1))
        lines[0] = "S" + lines[0][1:]
        lines[-1] = lines[-1][:-1] + "E"
        maze = Maze.from_text("\n".join(lines))
        path = depth_first_search(maze)
        assert len(path) > 1500
        assert path_is_valid(maze, path, maze.start, maze.end)


class TestBreadthFirst:
    def test_shortest_in_open_room(self) -> None:
        maze = Maze.from_text("S..\n...\n..E\n")
        assert breadth_first_search(maze) == [P(0, 0), P(1, 0), P(2, 0), P(2, 1), P(2, 2)]

    def test_prefers_shorter_of_two_routes(self) -> None:
        maze = Maze.from_text(
            "S....\n"
            ".###.\n"
            ".#...\n"
            ".#.##\n"
            "...E.\n"
        )
        path = breadth_first_search(maze)
        assert len(path) == shortest_length(maze, maze.start, maze.end)
        assert path[1] == P(1, 0)


class TestRandomMazes:
    def test_paths_are_valid_and_bfs_is_shortest(self) -> None:
        rng = np.random.default_rng(123)
        for _ in range(60):
            maze = random_maze(rng, 7, 9, 0.3)
            bfs = breadth_first_search(maze)
            dfs = depth_first_search(maze)
            expected = shortest_length(maze, maze.start, maze.end)
            assert len(bfs) == expected
            if expected == 0:
                assert dfs == []
                continue
            assert path_is_valid(maze, bfs, maze.start, maze.end)
            assert path_is_valid(maze, dfs, maze.start, maze.end)
            assert len(bfs) <= len(dfs)


class TestRegistry:
    def test_known_methods(self) -> None:
        assert get_strategy("bfs") is breadth_first_search
        assert get_strategy("dfs") is depth_first_search
        assert get_strategy("dfs", "recursive") is depth_first_search_recursive

    @pytest.mark.parametrize("method", ["astar", "DFS", "Bfs", ""])
    def test_unknown_method(self, method: str) -> None:
        with pytest.raises(UnknownMethodError):
            get_strategy(method)

    def test_unknown_dfs_variant(self) -> None:
        with pytest.raises(ValueError):
            get_strategy("dfs", "sideways")

    def test_solve(self) -> None:
        maze = Maze.from_text("S.#\n.#.\n..E\n")
        assert solve(maze, "bfs") == solve(maze, "dfs")
