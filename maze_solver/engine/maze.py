from __future__ import annotations

"""Text maze grid.

A maze is a list of character rows read from a plain-text file. This module
defines:
- Default tile characters ``WALL``, ``START``, ``END`` and ``PASSAGES``.
- Dataclass ``MazeSymbols`` grouping the characters a maze is read with.
- Class ``Maze`` with parsing, bounds-checked openness queries, start/end
  lookup, path marking and serialization.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple
import sys

from maze_solver.utils.errors import DuplicateMarkerError, FileOpenError, MissingMarkerError
from maze_solver.utils.grid_core import Position

# Tile characters
WALL = "#"
START = "S"
END = "E"
PASSAGES = (" ", ".")

# Bytes that are not valid UTF-8 round-trip unchanged through load, save and print
ENCODING = "utf-8"
ERRORS = "surrogateescape"


@dataclass(frozen=True)
class MazeSymbols:
    """Characters used to read and mark a maze.

    Attributes:
        wall: Non-traversable cell.
        start: Start marker (traversable).
        end: End marker (traversable).
        passages: Empty cells; the only cells a path mark may overwrite.
    """
    wall: str = WALL
    start: str = START
    end: str = END
    passages: Tuple[str, ...] = PASSAGES


class Maze:
    """Rows of characters with a start and an end marker.

    ``rows`` is the number of lines and ``cols`` the length of the first line.
    Lines may differ in length: a column past the end of a shorter line is
    treated like a wall, and anything past ``cols`` is out of bounds.
    """

    def __init__(
        self,
        lines: Iterable[str],
        symbols: MazeSymbols = MazeSymbols(),
        strict_markers: bool = True,
    ):
        """Build a maze from already split lines.

        Args:
            lines: Maze rows without line terminators.
            symbols: Tile characters to interpret the rows with.
            strict_markers: If True, a second start or end marker raises
                ``DuplicateMarkerError``; otherwise the first one is kept.
        """
        self.symbols = symbols
        self.grid: List[List[str]] = [list(line) for line in lines]
        self.rows = len(self.grid)
        self.cols = len(self.grid[0]) if self.rows else 0
        self._start: Optional[Position] = None
        self._end: Optional[Position] = None
        self._find_markers(strict_markers)

    @classmethod
    def from_text(cls, text: str, symbols: MazeSymbols = MazeSymbols(), strict_markers: bool = True) -> "Maze":
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        return cls(lines, symbols=symbols, strict_markers=strict_markers)

    @classmethod
    def load(cls, path: Path, symbols: MazeSymbols = MazeSymbols(), strict_markers: bool = True) -> "Maze":
        """Read and parse a maze file.

        Raises:
            FileOpenError: If the file cannot be opened.
        """
        try:
            with Path(path).open("r", encoding=ENCODING, errors=ERRORS, newline="") as f:
                text = f.read()
        except OSError as exc:
            raise FileOpenError(f"cannot load {path}") from exc
        return cls.from_text(text, symbols=symbols, strict_markers=strict_markers)

    def _find_markers(self, strict: bool) -> None:
        for r, line in enumerate(self.grid):
            for c, ch in enumerate(line):
                if ch == self.symbols.start:
                    self._start = self._record(self._start, Position(r, c), ch, strict)
                elif ch == self.symbols.end:
                    self._end = self._record(self._end, Position(r, c), ch, strict)

    @staticmethod
    def _record(seen: Optional[Position], found: Position, marker: str, strict: bool) -> Position:
        if seen is None:
            return found
        if strict:
            raise DuplicateMarkerError(marker, seen, found)
        return seen

    # --- Markers ---
    @property
    def start(self) -> Position:
        if self._start is None:
            raise MissingMarkerError(self.symbols.start)
        return self._start

    @property
    def end(self) -> Position:
        if self._end is None:
            raise MissingMarkerError(self.symbols.end)
        return self._end

    def has_markers(self) -> bool:
        return self._start is not None and self._end is not None

    # --- Queries ---
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, row: int, col: int) -> bool:
        """True for an in-bounds, non-wall cell; never raises."""
        if not self.in_bounds(row, col):
            return False
        line = self.grid[row]
        return col < len(line) and line[col] != self.symbols.wall

    def is_open_at(self, pos: Position) -> bool:
        return self.is_open(pos.row, pos.col)

    # --- Marking ---
    def set_if_passage(self, pos: Position, mark: str) -> bool:
        """Overwrite ``pos`` with ``mark`` if it holds a passage character.

        Returns:
            True if the cell was changed.
        """
        if not self.is_open_at(pos):
            return False
        if self.grid[pos.row][pos.col] not in self.symbols.passages:
            return False
        self.grid[pos.row][pos.col] = mark
        return True

    def mark_path(self, path: Iterable[Position], mark: str = "*") -> None:
        """Overlay ``mark`` on every passage cell of ``path``.

        Start, end and wall cells are left as they are, so marking the same
        path twice gives the same grid as marking it once.
        """
        for pos in path:
            self.set_if_passage(pos, mark)

    # --- Output ---
    def lines(self) -> List[str]:
        return ["".join(line) for line in self.grid]

    def render(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def save(self, path: Path) -> None:
        """Write the rendered maze to ``path``.

        Raises:
            FileOpenError: If the file cannot be written.
        """
        try:
            with Path(path).open("w", encoding=ENCODING, errors=ERRORS, newline="") as f:
                f.write(self.render())
        except OSError as exc:
            raise FileOpenError(f"cannot save {path}") from exc

    def print(self, stream: Optional[TextIO] = None) -> None:
        """Write the rendered maze to ``stream`` (stdout by default).

        Streams backed by a binary buffer receive the encoded bytes directly, so
        characters that were not valid UTF-8 in the input come out unchanged.
        """
        stream = stream or sys.stdout
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(self.render())
            return
        stream.flush()
        buffer.write(self.render().encode(ENCODING, ERRORS))
        buffer.flush()

    def __repr__(self) -> str:
        return f"Maze(rows={self.rows}, cols={self.cols}, start={self._start}, end={self._end})"
