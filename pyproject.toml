[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hagymi-tictactoe"
version = "0.1.0"
description = "Terminal tic-tac-toe against a simple rule-based bot"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "noughts-and-crosses", "game", "terminal", "bot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hagymi-tictactoe = "hagymi_tictactoe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hagymi_tictactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
