"""Number guessing game between 1 and 10."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, TextIO

from ossim.display import clear_screen
from ossim.sharedram import SharedRam

LOWEST = 1
HIGHEST = 10
RAM_TAKEN = 2

_BORDER = "\t\t" + "-*" * 24


class Hint(Enum):
    TOO_HIGH = "Too high!"
    TOO_LOW = "Too low!"
    CORRECT = "Correct!"


@dataclass
class GuessGame:
    """A secret number and the count of guesses made so far."""

    target: int
    tries: int = 0

    def __post_init__(self) -> None:
        if not LOWEST <= self.target <= HIGHEST:
            raise ValueError(f"target {self.target} out of range {LOWEST}..{HIGHEST}")

    @classmethod
    def new(cls, rng: random.Random | None = None) -> "GuessGame":
        rng = rng or random.Random()
        return cls(rng.randint(LOWEST, HIGHEST))

    @property
    def solved(self) -> bool:
        return self._solved

    _solved: bool = False

    def guess(self, value: int) -> Hint:
        """Count a guess and tell how it compares with the target."""
        self.tries += 1
        if value > self.target:
            return Hint.TOO_HIGH
        if value < self.target:
            return Hint.TOO_LOW
        self._solved = True
        return Hint.CORRECT


def play(read: Callable[[], str], out: TextIO, rng: random.Random | None = None) -> int:
    """Play one round and return the number of guesses it took."""
    game = GuessGame.new(rng)
    while True:
        out.write(f"Enter a guess between {LOWEST} and {HIGHEST} : ")
        out.flush()
        try:
            value = int(read())
        except ValueError:
            out.write("Invalid guess\n\n")
            continue
        hint = game.guess(value)
        if hint is Hint.CORRECT:
            out.write(f"\nCorrect! You got it in {game.tries} guesses!\n")
            return game.tries
        out.write(f"{hint.value}\n\n")


def _token_reader(stream: Iterable[str]) -> Callable[[], str]:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-guess-game")
    parser.parse_args(argv)
    out = sys.stdout
    out.write(f"{_BORDER}\n\t\t\tWELCOME TO THE GUESS GAME WORLD!\n{_BORDER}\n")
    try:
        ram = SharedRam.attach()
    except FileNotFoundError:
        ram = None
    if ram:
        ram.consume(RAM_TAKEN)
    read = _token_reader(sys.stdin)
    rng = random.Random()
    try:
        while True:
            out.write("Press 1 to start game\nPress 0 to exit game\n")
            out.flush()
            if read().strip() != "1":
                out.write("Game closed\n")
                return 0
            play(read, out, rng)
            time.sleep(3)
            clear_screen(out)
    except EOFError:
        return 0
    finally:
        if ram:
            ram.release(RAM_TAKEN)
            ram.close()


if __name__ == "__main__":
    sys.exit(main())