"""Command-line game: the player against the bot on a 3x3 board."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from hagymi_tictactoe.board import Board
from hagymi_tictactoe.bot import Bot
from hagymi_tictactoe.game import (
    Outcome,
    ask_for_replay,
    ask_player_coords,
    check_winner,
    decide_starting_player,
    marks_for_choice,
    outcome_message,
)

ReadLine = Callable[[], str]
Write = Callable[[str], object]

SIZE = 3


def ask_mark_choice(read_line: ReadLine, write: Write) -> int:
    """Prompt until the player picks 1 (X) or 2 (O); return the choice."""
    while True:
        write("Choose your character (1 for X, 2 for O): ")
        tokens = read_line().split()
        if tokens and tokens[0] in ("1", "2"):
            write("\n")
            return int(tokens[0])
        write("Invalid choice. Please try again.\n")


def _announce_start(rng: random.Random, write: Write) -> bool:
    bot_first = decide_starting_player(rng)
    write("Bot starts first.\n" if bot_first else "Player starts first.\n")
    return bot_first


def play(read_line: ReadLine, write: Write, rng: random.Random | None = None) -> None:
    """Run games until the player declines a replay."""
    rng = rng if rng is not None else random.Random()
    board = Board(SIZE, SIZE)
    player_mark, bot_mark = marks_for_choice(ask_mark_choice(read_line, write))
    bot = Bot(bot_mark, SIZE, rng)
    bot_first = _announce_start(rng, write)
    write(board.render())

    def finished() -> bool:
        outcome = check_winner(board.grid, player_mark, bot_mark)
        if outcome is Outcome.NONE:
            return False
        write(board.render())
        write(f"{outcome_message(outcome, player_mark, bot_mark)}\n")
        return True

    def restart() -> bool:
        nonlocal bot_first
        if not ask_for_replay(read_line, write):
            return False
        board.reset()
        write(board.render())
        bot_first = _announce_start(rng, write)
        return True

    while True:
        if not bot_first:
            row, col = ask_player_coords(board.grid, player_mark, read_line, write)
            board.set_cell(row, col, player_mark)
            if finished():
                if restart():
                    continue
                return

        place = bot.decide_place(board.grid, board.free_spaces())
        board.set_cell(place // board.cols, place % board.rows, bot_mark)
        write(board.render())

        if finished():
            if restart():
                continue
            return
        bot_first = False


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Play on the terminal; return 0 when done, 1 if input ran out."""
    try:
        play(_read_stdin_line, _write_stdout)
    except (EOFError, KeyboardInterrupt):
        _write_stdout("\n")
        return 1
    return 0