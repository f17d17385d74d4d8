"""Tic-tac-toe application: player against player or against the machine."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Iterable, TextIO

from ossim.board import (
    PLAYER_ONE,
    PLAYER_TWO,
    RECORD_FILE,
    Board,
    machine_move,
    read_scores,
    toss,
    write_scores,
)
from ossim.display import clear_screen, format_clock, ram_banner, wait_for_next_second
from ossim.sharedram import SharedRam

RAM_TAKEN = 6
RUNNING_FLAG = 2
REFUND = 1.0

_INVALID = "Invalid Input.\nEnter Again!\n"
_DRAWN = "\nNone of the players have successfully drawn 3-into-3, so the game is drawn.\n"
_MENU = (
    "\t\t\t\t\t\t\tMAIN MENU\n"
    "\t\t\t\t\t\t\t---------\n"
    "Press 1 to Play.\nPress 2 to check Score.\n"
    "Press 3 for Instructions/Rules of the game.\nPress 4 for Credits.\nPress 5 to Exit.\n"
)
_MODES = (
    "\n\t\t\t\t\t\t\t  MODES\n"
    "\t\t\t\t\t\t\t  -----\n"
    "Press 1 for Player Vs Machine.\nPress 2 for Player Vs Player.\n"
)
_RULES = (
    "\n\t\t\t\t\t\t   INSTRUCTIONS/RULES\n"
    "\t\t\t\t\t\t   ------------------\n"
    "1. There are only two mods : \n    i)Player Vs Player\n   ii)Player Vs Machine\n"
    "2. The goal of tic - tac - toe is to be the first player to get three in a row "
    "on a 3 - by - 3 grid.\n"
    "3. The player who is playing 'X' always goes first.\n"
    "4. Players alternate placing Xs and Os on the board until either player has three\n"
    "   in a row, horizontally, vertically, or diagonally or until all squares are filled.\n"
    "5. If a player is able to draw three Xs or three Os in a row, then that player wins.\n"
    "6. If all squares are filledand neither player has made a complete row Xs or Os, "
    "then the game is a draw.\n"
)
_CREDITS = "\n\t\t\t\t\t\t\t CREDITS\n\t\t\t\t\t\t\t -------\n"


def rules_text() -> str:
    """The instructions shown from the main menu."""
    return _RULES


def _ask_until_valid(board: Board, mark: str, prompt: str,
                     ask_cell: Callable[[str], int], out: TextIO) -> None:
    while True:
        cell = ask_cell(prompt)
        try:
            board.place(cell, mark)
        except ValueError:
            out.write(_INVALID)
        else:
            return


def play_match(
    board: Board,
    player_one_first: bool,
    vs_machine: bool,
    ask_cell: Callable[[str], int],
    rng: random.Random | None,
    out: TextIO,
) -> str | None:
    """Alternate moves until someone wins or the board fills; return the winning mark."""
    rng = rng or random.Random()
    player_one_turn = player_one_first
    while not board.is_full():
        if player_one_turn:
            out.write("\nInput player 1:-\n" if vs_machine else "Input Player 1:\n")
            _ask_until_valid(board, PLAYER_ONE, "Enter the block number: ", ask_cell, out)
        elif vs_machine:
            out.write("\nInput Machine:-\n")
            machine_move(board, rng)
        else:
            out.write("Input Player 2:\n")
            _ask_until_valid(board, PLAYER_TWO, "Enter the block number 2: ", ask_cell, out)
        out.write(board.render())
        winner = board.winner()
        if winner == PLAYER_ONE:
            out.write("Player 1 wins.\nPlayer 2 lose.\n")
            return winner
        if winner == PLAYER_TWO:
            out.write("Player 2 wins.\nPlayer 1 lose.\n")
            return winner
        player_one_turn = not player_one_turn
    out.write(_DRAWN)
    return None


def _token_reader(stream: Iterable[str]) -> Callable[[], str]:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def _as_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _record_result(winner: str | None) -> None:
    player_one, player_two, drawn = read_scores(RECORD_FILE)
    if winner == PLAYER_ONE:
        player_one += 1
    elif winner == PLAYER_TWO:
        player_two += 1
    else:
        drawn += 1
    write_scores(RECORD_FILE, (player_one, player_two, drawn))


def _scores_text() -> str:
    player_one, player_two, drawn = read_scores(RECORD_FILE)
    return (
        "\n\t\t\t\t\t\t\t SCORES\n\t\t\t\t\t\t\t ------"
        f"\nGames won by player 1: {player_one}\n"
        f"Games won by player 2: {player_two}\n"
        f"Games drawn: {drawn}\n"
    )


def _session(read: Callable[[], str], out: TextIO, remaining: float, rng: random.Random) -> None:
    board = Board()

    def ask_cell(prompt: str) -> int:
        out.write(prompt)
        out.flush()
        value = _as_int(read())
        return -1 if value is None else value

    def wants_exit() -> bool:
        out.write("\nPress 1 to exit OR Press any number to continue.")
        out.flush()
        answer = _as_int(read())
        clear_screen(out)
        if answer == 1:
            return True
        board.reset()
        return False

    while True:
        out.write(format_clock(wait_for_next_second()) + "\n")
        out.write(ram_banner("Tik Tak Toe Game", RAM_TAKEN, remaining))
        out.write(_MENU)
        out.flush()
        select = _as_int(read())
        if select == 1:
            while True:
                out.write(_MODES)
                out.flush()
                mode = _as_int(read())
                if mode in (1, 2):
                    break
                out.write(_INVALID)
            vs_machine = mode == 1
            out.write("Starting Player Vs Machine:-\n" if vs_machine
                      else "Starting Player Vs Player:-\n")
            first = toss(rng)
            if first:
                out.write("\nPlayer 1 won the toss.\n")
            else:
                out.write("Machine won the toss.\n" if vs_machine
                          else "\nPlayer 2 won the toss.\n")
            winner = play_match(board, first, vs_machine, ask_cell, rng, out)
            _record_result(winner)
        elif select == 2:
            out.write(_scores_text())
        elif select == 3:
            out.write(rules_text())
        elif select == 4:
            out.write(_CREDITS)
        elif select == 5:
            return
        else:
            out.write(_INVALID)
            continue
        if wants_exit():
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-tictactoe")
    parser.add_argument("ram", type=int, help="RAM handed over by the launcher, in GB")
    args = parser.parse_args(argv)
    try:
        ram = SharedRam.attach()
    except FileNotFoundError:
        ram = None
    write_scores(RECORD_FILE, (0, 0, 0))
    out = sys.stdout
    out.write("\t\t\t\t\t\tWELCOME TO TIC-TAC-TOE GAME\n")
    out.write("\t\t\t\t\t\t---------------------------\n\n")
    out.flush()
    time.sleep(3)
    try:
        _session(_token_reader(sys.stdin), out, args.ram - RAM_TAKEN, random.Random())
    except EOFError:
        pass
    finally:
        if ram:
            ram.set_flag(RUNNING_FLAG, 0)
            ram.release(REFUND)
            ram.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())