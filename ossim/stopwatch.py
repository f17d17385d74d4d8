"""Stopwatch that reports elapsed time every second until Enter is pressed."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, TextIO

from ossim.sharedram import SharedRam

RAM_TAKEN = 11

_BORDER = "\t\t" + "-*" * 24


class Stopwatch:
    """Measures seconds since creation or the last reset, to the microsecond."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        self._start = self._clock()

    def elapsed_seconds(self) -> float:
        micros = int((self._clock() - self._start) * 1_000_000)
        return micros / 1_000_000


def _display_elapsed(stop: threading.Event, stopwatch: Stopwatch, out: TextIO) -> None:
    while not stop.is_set():
        out.write(f"Elapsed time (in seconds): {stopwatch.elapsed_seconds():g}\n")
        out.flush()
        stop.wait(1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-stopwatch")
    parser.parse_args(argv)
    out = sys.stdout
    out.write(f"{_BORDER}\n\t\t\tWELCOME TO STOP WATCH PROCCESS!\n{_BORDER}\n")
    try:
        ram = SharedRam.attach()
    except FileNotFoundError:
        ram = None
    if ram:
        ram.consume(RAM_TAKEN)
    try:
        stopwatch = Stopwatch()
        stop = threading.Event()
        out.write("Stopwatch started. Press Enter to stop.\n")
        out.flush()
        display = threading.Thread(target=_display_elapsed, args=(stop, stopwatch, out))
        display.start()
        sys.stdin.readline()
        stop.set()
        display.join()
        out.write(
            "Stopwatch stopped. Final elapsed time (in seconds): "
            f"{stopwatch.elapsed_seconds():g}\n"
        )
        out.flush()
        time.sleep(2)
    finally:
        if ram:
            ram.release(RAM_TAKEN)
            ram.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())