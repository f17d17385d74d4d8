"""First-come, first-served scheduling calculator."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import Callable, Iterable, TextIO

from ossim.display import clear_screen, format_clock, ram_banner, wait_for_next_second

RAM_TAKEN = 3

_HEADER = "Process\tArrival Time\tBurst Time\tCompletion Time\tTurnaround Time\tWaiting Time\n"


@dataclass
class Process:
    id: int
    arrival_time: int
    burst_time: int
    completion_time: int = 0
    turnaround_time: int = 0
    waiting_time: int = 0


def schedule(processes: Iterable[Process]) -> list[Process]:
    """Order processes by arrival and fill in their timing figures."""
    current_time = 0
    scheduled = []
    for process in sorted(processes, key=attrgetter("arrival_time")):
        current_time += process.burst_time
        turnaround = current_time - process.arrival_time
        scheduled.append(
            replace(
                process,
                completion_time=current_time,
                turnaround_time=turnaround,
                waiting_time=turnaround - process.burst_time,
            )
        )
    return scheduled


def format_table(processes: Iterable[Process]) -> str:
    rows = [
        f"{p.id}\t{p.arrival_time}\t\t{p.burst_time}\t\t{p.completion_time}"
        f"\t\t{p.turnaround_time}\t\t{p.waiting_time}\n"
        for p in processes
    ]
    return _HEADER + "".join(rows)


def _token_reader(stream: Iterable[str]) -> Callable[[], str]:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def _read_processes(read: Callable[[], str], out: TextIO) -> list[Process]:
    out.write("Enter the number of processes: ")
    out.flush()
    count = int(read())
    processes = []
    for number in range(1, count + 1):
        out.write(f"Enter arrival time and burst time of process {number}: ")
        out.flush()
        arrival, burst = int(read()), int(read())
        processes.append(Process(number, arrival, burst))
    return processes


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-fcfs")
    parser.add_argument("ram", type=int, help="RAM handed over by the launcher, in GB")
    args = parser.parse_args(argv)
    read = _token_reader(sys.stdin)
    out = sys.stdout
    clear_screen(out)
    out.write("\n\n\n\t LOADING....\n")
    time.sleep(5)
    clear_screen(out)
    out.write("\n\n\n\n\t\t Welcome to FCFS Calculator  \t\t\n")
    time.sleep(5)
    try:
        while True:
            clear_screen(out)
            out.write(format_clock(wait_for_next_second()) + "\n")
            out.write(ram_banner("FCFS", RAM_TAKEN, args.ram - RAM_TAKEN))
            out.write("1. To FCFS\n2. for exit\n")
            out.flush()
            choice = read().strip()
            if choice == "2":
                return 0
            if choice != "1":
                continue
            try:
                processes = _read_processes(read, out)
            except ValueError:
                out.write("Invalid input\n")
                continue
            out.write(format_table(schedule(processes)))
            out.flush()
            time.sleep(10)
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())