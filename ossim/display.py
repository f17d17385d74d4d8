"""Clock line, screen clearing and the RAM banner shown by every application."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, TextIO

_RULE = "\t------------------------"


def format_clock(moment: datetime) -> str:
    """Format a moment as ``HH:MM:SS AM/PM``; hour 0 stays ``00``."""
    hours = moment.hour
    suffix = "PM" if hours >= 12 else "AM"
    if hours > 12:
        hours -= 12
    return f"{hours:02d}:{moment.minute:02d}:{moment.second:02d} {suffix}"


def wait_for_next_second(now: Callable[[], datetime] = datetime.now) -> datetime:
    """Poll ``now`` until the seconds counter ticks forward and return that moment."""
    previous = 0
    while True:
        moment = now()
        if moment.second == previous + 1 or (previous == 59 and moment.second == 0):
            return moment
        previous = moment.second


def clear_screen(out: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor home."""
    out = sys.stdout if out is None else out
    out.write("\033[2J\033[H")
    out.flush()


def _amount(value: float) -> str:
    return f"{float(value):g}"


def ram_banner(app_name: str, taken: float, remaining: float) -> str:
    """Text telling how much RAM an application took and how much is left."""
    return (
        f"\n{_RULE}\n"
        f"\t{app_name} has taken Ram : {_amount(taken)}\n"
        f"\tremaining RAM = {_amount(remaining)}gb\n"
        f"\n{_RULE}\n"
        "\n\n"
    )