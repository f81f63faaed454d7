"""A simple rule-based opponent for a square noughts-and-crosses board."""

from __future__ import annotations

import random
from collections.abc import Sequence

EMPTY = " "

Grid = Sequence[Sequence[str]]


class Bot:
    """Chooses moves: win if possible, else block, else build, else pick at random."""

    def __init__(self, mark: str, size: int, rng: random.Random | None = None) -> None:
        self.mark = mark
        self.size = size
        self.rng = rng if rng is not None else random.Random()

    def _coords(self, place: int) -> tuple[int, int]:
        return divmod(place, self.size)

    def _own_lines(self, grid: Grid, row: int, col: int) -> tuple[int, int, int, int]:
        return (
            self.own_in_row(grid, row),
            self.own_in_col(grid, col),
            self.own_in_diagonal(grid, row, col),
            self.own_in_anti_diagonal(grid, row, col),
        )

    def _opponent_lines(self, grid: Grid, row: int, col: int) -> tuple[int, int, int, int]:
        return (
            self.opponent_in_row(grid, row),
            self.opponent_in_col(grid, col),
            self.opponent_in_diagonal(grid, row, col),
            self.opponent_in_anti_diagonal(grid, row, col),
        )

    def decide_place(self, grid: Grid, free_spaces: Sequence[int]) -> int:
        """Return the flat index of the chosen free cell."""
        if not free_spaces:
            raise ValueError("no free spaces to choose from")

        for place in free_spaces:
            if 2 in self._own_lines(grid, *self._coords(place)):
                return place

        for place in free_spaces:
            if 2 in self._opponent_lines(grid, *self._coords(place)):
                return place

        largest = 0
        selected = 0
        for place in free_spaces:
            around = sum(self._own_lines(grid, *self._coords(place)))
            if around > largest:
                largest = around
                selected = place

        if largest == 0:
            selected = self.rng.choice(list(free_spaces))
        return selected

    def _own_count(self, cells, blockers) -> int:
        count = 0
        for cell, blocker in zip(cells, blockers):
            if cell == self.mark:
                count += 1
            elif blocker != EMPTY:
                return 0
        return count

    def own_in_row(self, grid: Grid, row: int) -> int:
        """Own marks in a row, or 0 if any other mark sits in it."""
        cells = [grid[row][i] for i in range(self.size)]
        return self._own_count(cells, cells)

    def own_in_col(self, grid: Grid, col: int) -> int:
        """Own marks in a column, or 0 if any other mark sits in it."""
        cells = [grid[i][col] for i in range(self.size)]
        return self._own_count(cells, cells)

    def own_in_diagonal(self, grid: Grid, row: int, col: int) -> int:
        """Own marks on the main diagonal through (row, col); 0 if the cell is off it."""
        n = self.size
        if not (row == col and 0 <= row < n):
            return 0
        cells = [grid[i][i] for i in range(n)]
        # Blocking is judged on the opposite diagonal's cell of each row.
        blockers = [grid[i][n - 1 - i] for i in range(n)]
        return self._own_count(cells, blockers)

    def own_in_anti_diagonal(self, grid: Grid, row: int, col: int) -> int:
        """Own marks on the anti-diagonal through (row, col); 0 if the cell is off it."""
        n = self.size
        if not (0 <= row < n and row + col == n - 1):
            return 0
        cells = [grid[i][n - 1 - i] for i in range(n)]
        blockers = [grid[i][i] for i in range(n)]
        return self._own_count(cells, blockers)

    def _opponent_count(self, cells) -> int:
        return sum(cell != self.mark and cell != EMPTY for cell in cells)

    def opponent_in_row(self, grid: Grid, row: int) -> int:
        """Number of other marks in a row."""
        return self._opponent_count(grid[row][i] for i in range(self.size))

    def opponent_in_col(self, grid: Grid, col: int) -> int:
        """Number of other marks in a column."""
        return self._opponent_count(grid[i][col] for i in range(self.size))

    def opponent_in_diagonal(self, grid: Grid, row: int, col: int) -> int:
        """Other marks on the main diagonal through (row, col); 0 if the cell is off it."""
        n = self.size
        if not (row == col and 0 <= row < n):
            return 0
        return self._opponent_count(grid[i][i] for i in range(n))

    def opponent_in_anti_diagonal(self, grid: Grid, row: int, col: int) -> int:
        """Other marks on the anti-diagonal through (row, col); 0 if the cell is off it."""
        n = self.size
        if not (0 <= row < n and row + col == n - 1):
            return 0
        return self._opponent_count(grid[i][n - 1 - i] for i in range(n))