# hagymi-tictactoe

Play tic-tac-toe in your terminal against Hagymi, a small rule-based bot.

## Installing

```
pip install .
```

## Playing

```
hagymi-tictactoe
```

1. Pick your mark. Enter `1` to play X or `2` to play O. The bot takes the other one.
2. A coin toss decides whether you or the bot moves first. The empty board is drawn.
3. When it is your turn, enter a row and a column from 1 to 3, separated by a space, for example `1 2`. If the cell is taken, the numbers are out of range or the input is not two numbers, you are asked again.
4. The board is redrawn after each bot move. When someone gets three in a row, column or diagonal, the board is drawn once more and the winner is named. A full board with no winner is a draw.
5. At the end you are asked `Do you want to play again? (y/n)`. Answer `y` or `n` (either case); anything else is asked again.

The command exits with status 0 when you decline a replay, and with status 1 if input ends (for example on Ctrl-D) or is interrupted.

## How the bot plays

On each turn Hagymi works through these rules in order:

1. It takes a free cell whose row, column or diagonal already holds two of its own marks and nothing that blocks it.
2. If there is none, it takes a free cell whose row, column or diagonal holds two of your marks.
3. If there is none, it picks the free cell whose lines hold the most of its own marks, counting only lines that are not blocked.
4. If nothing else applies, it picks a random free cell.

## Using it from Python

The pieces can also be used on their own:

- `hagymi_tictactoe.board.Board(rows, cols)` holds the grid in its `grid` attribute. It has `render()`, `reset()`, `set_cell(row, col, value)`, `get_cell(row, col)`, `free_count()` and `free_spaces()`, the last giving flat indices `row * cols + col` of the empty cells. Coordinates off the board raise `InvalidCellError`, a subclass of `IndexError`.
- `hagymi_tictactoe.bot.Bot(mark, size, rng=None)` chooses a move with `decide_place(grid, free_spaces)`, returning a flat index. It raises `ValueError` when there are no free spaces.
- `hagymi_tictactoe.game` has the `Outcome` enum (`NONE`, `PLAYER`, `BOT`, `DRAW`), `marks_for_choice`, `check_winner`, `render_grid`, `outcome_message`, `decide_starting_player` and the prompt helpers `ask_player_coords` and `ask_for_replay`.
- `hagymi_tictactoe.cli.play(read_line, write, rng=None)` runs a full session. You supply a function that returns one line of input, a function that writes text, and optionally a `random.Random`.

## What it does not do

The game is played on a fixed 3x3 board by one person against the bot. There is no two-player mode, no choice of board size for the command, and no saving of games or scores.

## Running the tests

```
pip install ".[test]"
pytest
```