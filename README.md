# ossim

`ossim` is a set of small terminal apps for teaching operating-system ideas.
It includes a task table in which each task has a priority and a RAM cost.
It also includes a shared-memory block that the apps use to account for
simulated RAM.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The apps

Some apps take the RAM handed to them, in GB, as a positional argument. Each
of these apps prints a banner that shows the current time and the RAM it has
taken.

| Command                      | What it does                                                        |
|------------------------------|---------------------------------------------------------------------|
| `ossim-calculator RAM`       | adds, subtracts, multiplies or divides two integers; division truncates toward zero |
| `ossim-calendar RAM`         | prints the calendar of a whole year                                 |
| `ossim-fcfs RAM`             | first-come-first-served scheduling: completion, turnaround and waiting times |
| `ossim-copy-file RAM`        | copies the contents of one file into another                        |
| `ossim-delete-file RAM`      | deletes a file                                                      |
| `ossim-move-file RAM`        | moves or renames a file                                             |
| `ossim-tictactoe RAM`        | tic-tac-toe, player against player or against the machine; keeps scores in `record.txt` |
| `ossim-guess`                | guess a number between 1 and 10                                     |
| `ossim-notepad`              | writes lines of text to a file and then leaves a signal in `IPC.txt` |
| `ossim-stopwatch`            | prints the elapsed time every second until Enter is pressed         |

For example:

```
ossim-fcfs 8
```

## Shared RAM

`ossim.sharedram.SharedRam` is a named shared-memory block (default name
`ossim_ram`). Slot 0 of the block holds the free RAM in GB. The other slots
are per-app flags.

* `SharedRam.create(name, total)` makes the block, or reuses an existing one,
  and resets it.
* `SharedRam.attach(name)` opens an existing block.
* `consume` and `release` move RAM out of the block and back in.
* `set_flag` and `flag` write and read the app flags.

When a block exists, the apps attach to it and adjust the counter as they
start and finish. When there is no block, they run without one.

## Using it as a library

```python
from ossim.fcfs import Process, schedule, format_table
from ossim.calendar_app import render_year
from ossim.calculator import calculate
from ossim.board import Board
from ossim.tasks import TaskTable

print(format_table(schedule([Process(1, 0, 5), Process(2, 1, 3)])))
print(render_year(2024))
print(calculate(4, -7, 2))   # -3

board = Board()
board.place(1, "X")
print(board.render())
print(board.winner())

table = TaskTable()          # starts with the default tasks
table.add("Editor", 4, 2)
table.delete("Calculator")
print(table.format_table())
```

## What it does not do

The package has no launcher. It provides:

* no login menu;
* no user or kernel mode;
* no password prompt;
* no command that picks an app from the task table, checks its RAM cost and
  starts it.

`ossim.tasks.TaskTable` and `SharedRam` provide the data for such a launcher,
but you have to start each app yourself with the commands above. Nothing in
the package creates the shared RAM block for you: call `SharedRam.create`
yourself if you want the apps to share one. There is no app for creating an
empty file or for playing music.