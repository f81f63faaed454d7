"""A rectangular grid of cells for a noughts-and-crosses game."""

from __future__ import annotations

EMPTY = " "


class InvalidCellError(IndexError):
    """Raised when a cell coordinate lies outside the board."""


class Board:
    """A grid of string cells, each either empty (a space) or holding a mark."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("board dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self.grid: list[list[str]] = [[EMPTY] * cols for _ in range(rows)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise InvalidCellError(f"invalid cell coordinates: ({row}, {col})")

    def render(self) -> str:
        """Return the board drawn as text, framed by horizontal rules."""
        rule = "-" * (self.cols * 4) + "---"
        lines = [rule]
        for row in self.grid:
            lines.append(" | " + "".join(f"{cell} | " for cell in row) if row else "")
            lines.append(rule)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def reset(self) -> None:
        """Empty every cell."""
        for row in self.grid:
            row[:] = [EMPTY] * len(row)

    def set_cell(self, row: int, col: int, value: str) -> None:
        """Put ``value`` into a cell; raise InvalidCellError if it is off the board."""
        self._check(row, col)
        self.grid[row][col] = value

    def get_cell(self, row: int, col: int) -> str:
        """Return the content of a cell; raise InvalidCellError if it is off the board."""
        self._check(row, col)
        return self.grid[row][col]

    def free_count(self) -> int:
        """Number of empty cells."""
        return sum(cell == EMPTY for row in self.grid for cell in row)

    def free_spaces(self) -> list[int]:
        """Flat indices (row * cols + col) of the empty cells, in row-major order."""
        return [
            r * self.cols + c
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell == EMPTY
        ]