"""Four-function integer calculator application."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Iterable, TextIO

from ossim.display import clear_screen, format_clock, ram_banner, wait_for_next_second
from ossim.sharedram import SharedRam

RAM_TAKEN = 4
RUNNING_FLAG = 1
QUIT = 5

_LABELS = {1: "Sum", 2: "difference", 3: "Product", 4: "Quotient"}

_MENU = (
    "Press 1 for addition\n"
    "Press 2 for subtraction\n"
    "Press 3 for multiplication\n"
    "Press 4 for division\n"
    "Press 5 to quit\n"
)


def calculate(option: int, a: int, b: int) -> int:
    """Apply menu ``option`` to ``a`` and ``b``; division truncates toward zero."""
    if option == 1:
        return a + b
    if option == 2:
        return a - b
    if option == 3:
        return a * b
    if option == 4:
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    raise ValueError(f"unknown option {option}")


def _read_int(read: Callable[[], str], out: TextIO, prompt: str) -> int:
    while True:
        out.write(prompt + "\n")
        token = read()
        try:
            return int(token)
        except ValueError:
            out.write("Invalid number\n")


def _serve(
    read: Callable[[], str],
    out: TextIO,
    remaining: float,
    show_clock: bool,
) -> None:
    while True:
        clear_screen(out)
        if show_clock:
            out.write(format_clock(wait_for_next_second()) + "\n")
        out.write(ram_banner("Calculator", RAM_TAKEN, remaining))
        out.write(_MENU)
        try:
            token = read()
        except EOFError:
            return
        try:
            option = int(token)
        except ValueError:
            option = None
        if option == QUIT:
            return
        if option not in _LABELS:
            out.write("Wrong option\n")
            continue
        try:
            a = _read_int(read, out, "Enter first number")
            b = _read_int(read, out, "Enter second number")
        except EOFError:
            return
        try:
            result = calculate(option, a, b)
        except ZeroDivisionError:
            out.write("Cannot divide by zero\n")
            continue
        out.write(f"{_LABELS[option]} of a and b is {result}\n")


def run(read: Callable[[], str], out: TextIO) -> None:
    """Serve the calculator menu until the user quits or input runs out."""
    _serve(read, out, 0.0, False)


def _token_reader(stream: Iterable[str]) -> Callable[[], str]:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-calculator")
    parser.add_argument("ram", type=int, help="RAM handed over by the launcher, in GB")
    args = parser.parse_args(argv)
    time.sleep(2)
    try:
        ram = SharedRam.attach()
    except FileNotFoundError:
        ram = None
    remaining = ram.release(0.5) if ram else float(args.ram)
    try:
        _serve(_token_reader(sys.stdin), sys.stdout, remaining, True)
    finally:
        if ram:
            ram.set_flag(RUNNING_FLAG, 0)
            ram.release(0.5)
            ram.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())