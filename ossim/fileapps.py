"""Copy, delete and move file applications."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from ossim.display import clear_screen, format_clock, ram_banner, wait_for_next_second
from ossim.sharedram import SharedRam


def copy_file(source: str | os.PathLike, target: str | os.PathLike) -> None:
    """Copy the contents of ``source`` into ``target``, replacing what was there."""
    shutil.copyfile(source, target)


def delete_file(name: str | os.PathLike) -> None:
    """Remove the file ``name``; raises OSError if that fails."""
    os.remove(name)


def move_file(old: str | os.PathLike, new: str | os.PathLike) -> None:
    """Rename or move ``old`` to ``new``; raises OSError if that fails."""
    os.rename(old, new)


@dataclass(frozen=True)
class _App:
    prog: str
    title: str
    ram_taken: int
    running_flag: int
    refund: float
    prompts: tuple[str, ...]
    action: Callable[..., None]
    success: str
    failure: str


_COPY = _App(
    prog="ossim-copy-file",
    title="Copy File",
    ram_taken=3,
    running_flag=6,
    refund=0.05,
    prompts=("Enter the Name of Source File: ", "\nEnter the Name of Target File: "),
    action=copy_file,
    success="\nFile copied successfully.",
    failure="\nError Occurred!",
)

_DELETE = _App(
    prog="ossim-delete-file",
    title="Delete File",
    ram_taken=3,
    running_flag=7,
    refund=0.05,
    prompts=("Enter the Name of File: \n",),
    action=delete_file,
    success="\nFile Deleted Successfully!",
    failure="\nError Occurred!",
)

_MOVE = _App(
    prog="ossim-move-file",
    title="Move File",
    ram_taken=2,
    running_flag=5,
    refund=0.5,
    prompts=(
        "Enter the name of a file you want to move (include directory structure)\n",
        "Enter the new location (include directory structure)\n",
    ),
    action=move_file,
    success="File successfully moved",
    failure="Error moving file",
)


def _token_reader(stream: Iterable[str]) -> Callable[[], str]:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def _wants_exit(token: str) -> bool:
    try:
        return int(token) == 0
    except ValueError:
        return False


def _run(app: _App, argv: list[str] | None) -> int:
    parser = argparse.ArgumentParser(prog=app.prog)
    parser.add_argument("ram", type=int, help="RAM handed over by the launcher, in GB")
    args = parser.parse_args(argv)
    try:
        ram = SharedRam.attach()
    except FileNotFoundError:
        ram = None
    read = _token_reader(sys.stdin)
    out = sys.stdout
    try:
        while True:
            clear_screen(out)
            out.write(format_clock(wait_for_next_second()) + "\n")
            out.write(ram_banner(app.title, app.ram_taken, args.ram - app.ram_taken))
            names = []
            for prompt in app.prompts:
                out.write(prompt)
                out.flush()
                names.append(read())
            try:
                app.action(*names)
            except OSError:
                out.write(app.failure + "\n")
            else:
                out.write(app.success + "\n")
            out.flush()
            time.sleep(3)
            out.write(f" Enter 0 to EXIT {app.title} App\n")
            out.flush()
            if _wants_exit(read()):
                return 0
    except EOFError:
        return 0
    finally:
        if ram:
            ram.set_flag(app.running_flag, 0)
            ram.release(app.refund)
            ram.close()


def copy_file_main(argv: list[str] | None = None) -> int:
    return _run(_COPY, argv)


def delete_file_main(argv: list[str] | None = None) -> int:
    return _run(_DELETE, argv)


def move_file_main(argv: list[str] | None = None) -> int:
    return _run(_MOVE, argv)