[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Small terminal teaching apps with a task table and shared RAM accounting for an operating-system simulator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "simulator",
    "education",
    "fcfs",
    "scheduling",
    "terminal",
    "tic-tac-toe",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-calculator = "ossim.calculator:main"
ossim-calendar = "ossim.calendar_app:main"
ossim-fcfs = "ossim.fcfs:main"
ossim-copy-file = "ossim.fileapps:copy_file_main"
ossim-delete-file = "ossim.fileapps:delete_file_main"
ossim-move-file = "ossim.fileapps:move_file_main"
ossim-guess = "ossim.guessgame:main"
ossim-notepad = "ossim.notepad:main"
ossim-stopwatch = "ossim.stopwatch:main"
ossim-tictactoe = "ossim.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
