"""Line-by-line note writer."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Iterator, TextIO

IPC_FILE = "IPC.txt"
_YET_TO_READ = 1
_TERMINATE_SIGNAL = 1
_PROCESS_CHOICE = 7


def write_lines(path: str | os.PathLike, lines: Iterable[str]) -> int:
    """Write each line to ``path`` followed by a newline; return how many were written."""
    count = 0
    with open(path, "w", encoding="utf-8") as file:
        for line in lines:
            file.write(line + "\n")
            file.flush()
            count += 1
    return count


def write_ipc_signal(path: str | os.PathLike = IPC_FILE) -> None:
    """Leave the finished-notepad signal for the launcher."""
    with open(path, "w", encoding="utf-8") as file:
        file.write(f"{_YET_TO_READ},{_TERMINATE_SIGNAL},{_PROCESS_CHOICE}\n")


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-notepad")
    parser.parse_args(argv)
    stdin, out = sys.stdin, sys.stdout
    out.write("Enter the filename: ")
    out.flush()
    try:
        filename = _read_line(stdin)
    except EOFError:
        return 1
    finished = False

    def dialogue() -> Iterator[str]:
        nonlocal finished
        try:
            while True:
                out.write("Enter text to write to file: ")
                out.flush()
                yield _read_line(stdin)
                out.write("Want to continue writing to the file? (y/n)\n")
                out.flush()
                answer = ""
                while not answer:
                    answer = _read_line(stdin).strip()
                if answer[0] == "n":
                    finished = True
                    return
        except EOFError:
            return

    write_lines(filename, dialogue())
    out.write(f"File saved: {filename}\n")
    if finished:
        write_ipc_signal()
    return 0


if __name__ == "__main__":
    sys.exit(main())