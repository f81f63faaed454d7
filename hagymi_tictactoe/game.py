"""Rules, prompts and messages for a game of noughts and crosses against the bot."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Sequence

EMPTY = " "

Grid = Sequence[Sequence[str]]
ReadLine = Callable[[], str]
Write = Callable[[str], object]


class Outcome(enum.IntEnum):
    """State of a board after a move."""

    NONE = 0
    PLAYER = 1
    BOT = 2
    DRAW = 3


def marks_for_choice(choice: int) -> tuple[str, str]:
    """Return ``(player_mark, bot_mark)``: choice 1 plays X, anything else plays O."""
    if choice == 1:
        return "X", "O"
    return "O", "X"


def _three(cells: Sequence[str], mark: str) -> bool:
    return all(cell == mark for cell in cells)


def check_winner(grid: Grid, player_mark: str, bot_mark: str) -> Outcome:
    """Judge a three-in-a-row board: who has won, a draw, or nothing yet."""
    for row in grid:
        line = row[:3]
        if _three(line, player_mark):
            return Outcome.PLAYER
        if _three(line, bot_mark):
            return Outcome.BOT

    cols = len(grid[0]) if grid else 0
    for j in range(cols):
        line = [grid[0][j], grid[1][j], grid[2][j]]
        if _three(line, player_mark):
            return Outcome.PLAYER
        if _three(line, bot_mark):
            return Outcome.BOT

    diagonal = [grid[0][0], grid[1][1], grid[2][2]]
    anti_diagonal = [grid[0][2], grid[1][1], grid[2][0]]
    if _three(diagonal, player_mark) or _three(anti_diagonal, player_mark):
        return Outcome.PLAYER
    if _three(diagonal, bot_mark) or _three(anti_diagonal, bot_mark):
        return Outcome.BOT

    if all(cell != EMPTY for row in grid for cell in row):
        return Outcome.DRAW
    return Outcome.NONE


def render_grid(grid: Grid) -> str:
    """Draw a grid as text, framed by horizontal rules."""
    cols = len(grid[0]) if grid else 0
    rule = "-" * (cols * 4) + "---"
    lines = [rule]
    for row in grid:
        lines.append(" | " + "".join(f"{cell} | " for cell in row) if row else "")
        lines.append(rule)
    return "\n".join(lines) + "\n"


def outcome_message(outcome: Outcome, player_mark: str, bot_mark: str) -> str | None:
    """The line announcing a finished game, or None while the game goes on."""
    if outcome is Outcome.PLAYER:
        return f"Player {player_mark} wins!"
    if outcome is Outcome.BOT:
        return f"Bot {bot_mark} wins!"
    if outcome is Outcome.DRAW:
        return "It's a draw!"
    return None


def _parse_coords(line: str) -> tuple[int, int] | None:
    tokens = line.split()
    if len(tokens) < 2:
        return None
    try:
        row, col = int(tokens[0]), int(tokens[1])
    except ValueError:
        return None
    return row - 1, col - 1


def ask_player_coords(grid: Grid, mark: str, read_line: ReadLine, write: Write) -> tuple[int, int]:
    """Prompt until the player names a free cell; return its zero-based (row, col)."""
    while True:
        write(
            f"Enter the coordinates for {mark} "
            "(row and column, seperate with space, for example: 1 2): "
        )
        coords = _parse_coords(read_line())
        write("\n")
        if coords is not None:
            row, col = coords
            if 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] == EMPTY:
                return row, col
        write("Invalid coordinates. Please try again.\n")


def ask_for_replay(read_line: ReadLine, write: Write) -> bool:
    """Ask whether to play again; accept y/Y or n/N, re-asking on anything else."""
    while True:
        write("Do you want to play again? (y/n): ")
        answer = ""
        while not answer:
            answer = read_line().strip()
        letter = answer[0]
        if letter in "yY":
            return True
        if letter in "nN":
            return False
        write("Invalid input. Please enter 'y' or 'n'.\n")


def decide_starting_player(rng: random.Random) -> bool:
    """Toss a coin; True means the bot moves first."""
    return rng.randint(0, 1) == 1