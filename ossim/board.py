"""Tic-tac-toe board, machine moves, the toss and the score record."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass, field

EMPTY = "-"
PLAYER_ONE = "X"
PLAYER_TWO = "O"
MARKS = (PLAYER_ONE, PLAYER_TWO)
CELLS = 9
RECORD_FILE = "record.txt"

_ROWS = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
_COLUMNS = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
_DIAGONALS = ((0, 4, 8), (2, 4, 6))
_ROW_RULE = "\n\t----------\n\t"


@dataclass
class Board:
    """Nine cells numbered 1 to 9, each empty or holding a player's mark."""

    cells: list[str] = field(default_factory=lambda: [EMPTY] * CELLS)

    def __post_init__(self) -> None:
        if len(self.cells) != CELLS:
            raise ValueError(f"a board has {CELLS} cells, got {len(self.cells)}")
        bad = [cell for cell in self.cells if cell != EMPTY and cell not in MARKS]
        if bad:
            raise ValueError(f"invalid cell contents {bad!r}")

    def place(self, cell: int, mark: str) -> None:
        """Put ``mark`` in block ``cell`` (1..9); the block must be empty."""
        if mark not in MARKS:
            raise ValueError(f"mark must be one of {MARKS}, got {mark!r}")
        if not 1 <= cell <= CELLS:
            raise ValueError(f"block {cell} out of range 1..{CELLS}")
        if self.cells[cell - 1] != EMPTY:
            raise ValueError(f"block {cell} is already taken")
        self.cells[cell - 1] = mark

    def winner(self) -> str | None:
        """The mark with three in a row, checking rows, then columns, then diagonals."""
        for line in (*_ROWS, *_COLUMNS, *_DIAGONALS):
            first = self.cells[line[0]]
            if first != EMPTY and all(self.cells[i] == first for i in line):
                return first
        return None

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def free_cells(self) -> list[int]:
        """Numbers (from 1) of the blocks still empty."""
        return [number for number, cell in enumerate(self.cells, start=1) if cell == EMPTY]

    def reset(self) -> None:
        self.cells[:] = [EMPTY] * CELLS

    def render(self) -> str:
        """The board drawn as the game shows it after every move."""
        rows = (" | ".join(self.cells[i] for i in row) for row in _ROWS)
        return "   **Pattern**\n\t" + _ROW_RULE.join(rows) + "\n"


def machine_move(board: Board, rng: random.Random | None = None) -> int:
    """Place the machine's mark in a random free block and return its number."""
    if board.is_full():
        raise ValueError("no free block left for the machine")
    rng = rng or random.Random()
    while True:
        cell = rng.randint(1, CELLS)
        if board.cells[cell - 1] == EMPTY:
            board.place(cell, PLAYER_TWO)
            return cell


def toss(rng: random.Random | None = None) -> bool:
    """Draw 1..9; an even number means player one moves first."""
    rng = rng or random.Random()
    return rng.randint(1, 9) % 2 == 0


def read_scores(path: str | os.PathLike = RECORD_FILE) -> tuple[int, int, int]:
    """Wins of player one, wins of player two and draws; missing values count as 0."""
    try:
        with open(path, encoding="utf-8") as file:
            tokens = file.read().split()
    except FileNotFoundError:
        return (0, 0, 0)
    scores = []
    for token in tokens[:3]:
        try:
            scores.append(int(token))
        except ValueError:
            break
    scores.extend([0] * (3 - len(scores)))
    return (scores[0], scores[1], scores[2])


def write_scores(path: str | os.PathLike, scores: tuple[int, int, int]) -> None:
    """Store the three scores followed by the unused fourth field."""
    player_one, player_two, drawn = scores
    with open(path, "w", encoding="utf-8") as file:
        file.write(f"{player_one} {player_two} {drawn} 0")