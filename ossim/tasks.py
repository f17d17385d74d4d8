"""Table of the applications the simulator knows, with their RAM use and priority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

CAPACITY = 20
_COLUMN = 20


@dataclass
class Task:
    """One application: identifier, name, RAM use in GB and priority (higher wins)."""

    id: int
    name: str
    ram_use: int
    priority: int

    @classmethod
    def blank(cls) -> "Task":
        """An empty slot: no name, no RAM, no priority."""
        return cls(0, "", 0, 0)


def default_tasks() -> list[Task]:
    """The applications loaded at start-up, in menu order."""
    return [
        Task(1, "Calculator", 4, 1),
        Task(2, "TIC TAC TOE", 6, 2),
        Task(5, "Make FIle", 2, 3),
        Task(7, "Move File", 2, 8),
        Task(8, "Copy File Content", 3, 7),
        Task(9, "Delete FIle", 3, 9),
        Task(10, "Find FCSF", 3, 10),
        Task(11, "play music", 5, 19),
        Task(12, "open calendar", 2, 15),
        Task(19, "NotePad", 4, 6),
        Task(17, "Stopwatch", 2, 12),
        Task(13, "Guess Game", 5, 11),
        Task(17, "Open Google Chrome", 3, 17),
    ]


class TaskTable:
    """Fixed-capacity table of task slots; deleting a task leaves its slot blank."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        slots = list(default_tasks() if tasks is None else tasks)
        if len(slots) > CAPACITY:
            raise ValueError(f"at most {CAPACITY} tasks fit in the table")
        self._slots = slots

    def __iter__(self) -> Iterator[Task]:
        """Tasks that still have a name, in slot order."""
        return (task for task in self._slots if task.name)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def add(self, name: str, priority: int, ram_use: int) -> Task:
        """Put a new task in the next free slot and return it."""
        if not name:
            raise ValueError("a task needs a name")
        if len(self._slots) >= CAPACITY:
            raise ValueError(f"the task table is full ({CAPACITY} slots)")
        task = Task(0, name, ram_use, priority)
        self._slots.append(task)
        return task

    def delete(self, name: str) -> bool:
        """Blank the first task called ``name``; tell whether one was found."""
        if not name:
            return False
        for index, task in enumerate(self._slots):
            if task.name == name:
                self._slots[index] = Task.blank()
                return True
        return False

    def for_option(self, option: int) -> Task:
        """The task behind menu ``option`` (from 1); an unused slot is blank."""
        if not 1 <= option <= CAPACITY:
            raise IndexError(f"option {option} out of range 1..{CAPACITY}")
        if option - 1 < len(self._slots):
            return self._slots[option - 1]
        return Task.blank()

    def format_table(self) -> str:
        """Name, priority and RAM of every named task in fixed-width columns."""
        lines = [f"{'Name':<{_COLUMN}}{'Priority':<{_COLUMN}}{'RAM':<{_COLUMN}}"]
        lines.extend(
            f"{task.name:<{_COLUMN}}{task.priority!s:<{_COLUMN}}{task.ram_use!s:<{_COLUMN}}"
            for task in self
        )
        return "\n".join(lines) + "\n"