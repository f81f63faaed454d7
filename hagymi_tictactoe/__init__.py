"""Terminal tic-tac-toe against a simple rule-based bot: board, bot, rules and command."""

__version__ = "0.1.0"