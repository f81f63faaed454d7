import random

import pytest

from hagymi_tictactoe.board import Board
from hagymi_tictactoe.game import (
    Outcome,
    ask_for_replay,
    ask_player_coords,
    check_winner,
    decide_starting_player,
    marks_for_choice,
    outcome_message,
    render_grid,
)


def scripted(lines):
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


class Recorder:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


def grid_of(*rows):
    return [list(row) for row in rows]


def test_marks_for_choice():
    assert marks_for_choice(1) == ("X", "O")
    assert marks_for_choice(2) == ("O", "X")


def test_row_win_for_player():
    grid = grid_of("XXX", "OO ", "   ")
    assert check_winner(grid, "X", "O") is Outcome.PLAYER


def test_column_win_for_bot():
    grid = grid_of("OX ", "OX ", "O  ")
    assert check_winner(grid, "X", "O") is Outcome.BOT


def test_diagonal_wins():
    assert check_winner(grid_of("X O", " XO", "  X"), "X", "O") is Outcome.PLAYER
    assert check_winner(grid_of("XXO", " O ", "O  "), "X", "O") is Outcome.BOT


def test_draw_and_ongoing():
    full = grid_of("XOX", "XOO", "OXX")
    assert check_winner(full, "X", "O") is Outcome.DRAW
    assert check_winner(grid_of("XO ", "   ", "   "), "X", "O") is Outcome.NONE
    assert check_winner(grid_of("   ", "   ", "   "), "X", "O") is Outcome.NONE


def test_render_grid_matches_board():
    board = Board(3, 3)
    board.set_cell(1, 2, "X")
    assert render_grid(board.grid) == board.render()
    assert render_grid(board.grid).splitlines()[0] == "-" * 15


def test_outcome_messages():
    assert outcome_message(Outcome.PLAYER, "X", "O") == "Player X wins!"
    assert outcome_message(Outcome.BOT, "X", "O") == "Bot O wins!"
    assert outcome_message(Outcome.DRAW, "X", "O") == "It's a draw!"
    assert outcome_message(Outcome.NONE, "X", "O") is None


def test_ask_player_coords_valid():
    grid = grid_of("   ", "   ", "   ")
    out = Recorder()
    assert ask_player_coords(grid, "X", scripted(["2 3"]), out) == (1, 2)
    assert "Enter the coordinates for X" in out.text
    assert "Invalid" not in out.text


def test_ask_player_coords_rejects_bad_input():
    grid = grid_of("O  ", "   ", "   ")
    out = Recorder()
    lines = ["0 0", "4 1", "a b", "1", "1 1", "2 2"]
    assert ask_player_coords(grid, "X", scripted(lines), out) == (1, 1)
    assert out.text.count("Invalid coordinates. Please try again.") == 5


def test_ask_player_coords_propagates_eof():
    with pytest.raises(EOFError):
        ask_player_coords(grid_of("   ", "   ", "   "), "X", scripted(["9 9"]), Recorder())


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("Y", True), ("yes", True), ("n", False), ("N", False)],
)
def test_ask_for_replay(answer, expected):
    assert ask_for_replay(scripted([answer]), Recorder()) is expected


def test_ask_for_replay_retries():
    out = Recorder()
    assert ask_for_replay(scripted(["maybe", "", "y"]), out) is True
    assert out.text.count("Invalid input. Please enter 'y' or 'n'.") == 1
    assert out.text.count("Do you want to play again? (y/n): ") == 2


class FixedCoin:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        assert (a, b) == (0, 1)
        return self.value


def test_decide_starting_player():
    assert decide_starting_player(FixedCoin(1)) is True
    assert decide_starting_player(FixedCoin(0)) is False
    results = {decide_starting_player(random.Random(seed)) for seed in range(40)}
    assert results == {True, False}