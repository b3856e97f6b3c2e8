import pytest

from maze_solver.engine.maze import Maze
from maze_solver.engine.path_renderer import RenderCfg, render_path
from maze_solver.utils.grid_core import Position

TINY = "S.#\n.#.\n..E\n"
ROUTE = [Position(0, 0), Position(1, 0), Position(2, 0), Position(2, 1), Position(2, 2)]


def test_char_style_uses_mark():
    maze = render_path(Maze.from_text(TINY), ROUTE, RenderCfg(mark="@"))
    assert maze.render() == "S.#\n@#.\n@@E\n"


def test_default_mark_is_star():
    assert render_path(Maze.from_text(TINY), ROUTE).render() == "S.#\n*#.\n**E\n"


def test_arrow_style_points_to_next_step():
    maze = render_path(Maze.from_text(TINY), ROUTE, RenderCfg(style="arrows"))
    assert maze.render() == "S.#\nv#.\n>>E\n"


def test_arrows_rendered_twice_are_unchanged():
    maze = Maze.from_text("S...\n...E\n")
    route = [Position(0, 0), Position(0, 1), Position(0, 2), Position(0, 3), Position(1, 3)]
    render_path(maze, route, RenderCfg(style="arrows"))
    first = maze.render()
    render_path(maze, route, RenderCfg(style="arrows"))
    assert first == maze.render() == "S>>v\n...E\n"


def test_empty_path_is_noop():
    maze = Maze.from_text(TINY)
    render_path(maze, [], RenderCfg(style="arrows"))
    assert maze.render() == TINY


def test_unknown_style():
    with pytest.raises(ValueError, match="unknown render style"):
        render_path(Maze.from_text(TINY), ROUTE, RenderCfg(style="bold"))


def test_non_adjacent_step():
    with pytest.raises(ValueError, match="not adjacent"):
        render_path(Maze.from_text(TINY), [Position(0, 0), Position(2, 2)], RenderCfg(style="arrows"))
