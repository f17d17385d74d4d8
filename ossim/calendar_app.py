"""Whole-year calendar printer."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Iterable

from ossim.display import clear_screen, format_clock, ram_banner, wait_for_next_second
from ossim.sharedram import SharedRam

RAM_TAKEN = 3
RUNNING_FLAG = 10

_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def day_number(day: int, month: int, year: int) -> int:
    """Weekday of a date, 0 for Sunday; ``month`` counts from 1."""
    if not 1 <= month <= 12:
        raise ValueError(f"month {month} out of range 1..12")
    if month < 3:
        year -= 1
    return (year + year // 4 - year // 100 + year // 400 + _OFFSETS[month - 1] + day) % 7


def month_name(index: int) -> str:
    """Name of the month at ``index``, counting from 0."""
    if not 0 <= index < 12:
        raise IndexError(f"month index {index} out of range 0..11")
    return MONTHS[index]


def number_of_days(month_index: int, year: int) -> int:
    """Days in the month at ``month_index`` (from 0) of ``year``."""
    if not 0 <= month_index < 12:
        raise IndexError(f"month index {month_index} out of range 0..11")
    if month_index == 1:
        leap = year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)
        return 29 if leap else 28
    return 31 - (month_index % 7 % 2)


def render_year(year: int) -> str:
    """Coloured text calendar for every month of ``year``."""
    parts = [f"\033[1;32m\tCalendar for {year}\n"]
    current = day_number(1, 1, year)
    for index in range(12):
        parts.append(f"\033[1;31m\n  ------------ {month_name(index)} ------------\n\033[0m")
        parts.append("\033[1;32m  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n")
        parts.append("    " * current)
        column = current
        for day in range(1, number_of_days(index, year) + 1):
            parts.append(f"   {day}")
            column += 1
            if column > 6:
                column = 0
                parts.append("\n")
        if column:
            parts.append("\n")
        current = column
    return "".join(parts)


def _token_reader(stream: Iterable[str]) -> Callable[[], str]:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-calendar")
    parser.add_argument("ram", type=int, help="RAM handed over by the launcher, in GB")
    args = parser.parse_args(argv)
    try:
        ram = SharedRam.attach()
    except FileNotFoundError:
        ram = None
    remaining = ram.available if ram else float(args.ram)
    read = _token_reader(sys.stdin)
    out = sys.stdout
    try:
        while True:
            clear_screen(out)
            out.write(format_clock(wait_for_next_second()) + "\n")
            out.write(ram_banner("Calendar", RAM_TAKEN, remaining))
            out.write("Enter Year: ")
            out.flush()
            try:
                year = int(read())
            except ValueError:
                out.write("Invalid year\n")
                continue
            out.write(render_year(year))
            out.write("\033[0m")
            time.sleep(3)
            out.write(" Enter 0 to EXIT Calendar App\n")
            out.flush()
            if read().strip() == "0":
                return 0
    except EOFError:
        return 0
    finally:
        if ram:
            ram.set_flag(RUNNING_FLAG, 0)
            ram.close()


if __name__ == "__main__":
    sys.exit(main())