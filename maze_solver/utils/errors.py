from __future__ import annotations


class MazeError(Exception):
    """Base class for every failure the solver reports to the user.

    Attributes:
        exit_code: Process exit status used by the command-line runner.
    """
    exit_code: int = 1


class UsageError(MazeError):
    """Wrong number or shape of command-line arguments."""


class FileOpenError(MazeError):
    """Input maze unreadable or output file unwritable."""


class UnknownMethodError(MazeError):
    """Search method name is neither ``dfs`` nor ``bfs``."""

    def __init__(self, method: str):
        super().__init__(f"unknown method '{method}'. Use dfs or bfs.")
        self.method = method


class MissingMarkerError(MazeError):
    """The maze has no start or no end marker."""

    def __init__(self, marker: str):
        super().__init__(f"maze has no '{marker}' marker")
        self.marker = marker


class DuplicateMarkerError(MazeError):
    """A start or end marker appears more than once."""

    def __init__(self, marker: str, first, second):
        super().__init__(
            f"marker '{marker}' appears more than once "
            f"(row {first.row}, col {first.col} and row {second.row}, col {second.col})"
        )
        self.marker = marker


class NoPathFound(MazeError):
    # Not a failure: the runner prints it on stdout and exits 0.
    exit_code = 0

    def __init__(self):
        super().__init__("No path found.")


class ConfigError(MazeError):
    """A config file parsed but holds an invalid value."""
