import random

import pytest

from ossim.board import (
    Board,
    machine_move,
    read_scores,
    toss,
    write_scores,
)


class _FixedRng:
    def __init__(self, *values):
        self._values = list(values)

    def randint(self, low, high):
        return self._values.pop(0)


def test_new_board_is_empty():
    board = Board()
    assert board.free_cells() == list(range(1, 10))
    assert board.winner() is None
    assert not board.is_full()


def test_place_marks_cell():
    board = Board()
    board.place(5, "X")
    assert board.cells[4] == "X"
    assert 5 not in board.free_cells()


def test_place_taken_cell_raises():
    board = Board()
    board.place(1, "O")
    with pytest.raises(ValueError):
        board.place(1, "X")


@pytest.mark.parametrize("cell", [0, 10, -1])
def test_place_out_of_range_raises(cell):
    with pytest.raises(ValueError):
        Board().place(cell, "X")


def test_place_bad_mark_raises():
    with pytest.raises(ValueError):
        Board().place(1, "Z")


def test_board_rejects_wrong_size():
    with pytest.raises(ValueError):
        Board(["-"] * 8)


@pytest.mark.parametrize(
    "cells, mark",
    [
        ((1, 2, 3), "X"),
        ((4, 5, 6), "O"),
        ((7, 8, 9), "X"),
        ((1, 4, 7), "O"),
        ((2, 5, 8), "X"),
        ((3, 6, 9), "O"),
        ((1, 5, 9), "X"),
        ((3, 5, 7), "O"),
    ],
)
def test_winner_lines(cells, mark):
    board = Board()
    for cell in cells:
        board.place(cell, mark)
    assert board.winner() == mark


def test_no_winner_on_drawn_board():
    board = Board(list("XOXXOOOXX"))
    assert board.is_full()
    assert board.winner() is None
    assert board.free_cells() == []


def test_reset_clears_board():
    board = Board(list("XOXXOOOXX"))
    board.reset()
    assert board.cells == ["-"] * 9


def test_render_empty_board():
    expected = (
        "   **Pattern**\n\t"
        "- | - | -\n\t----------\n\t"
        "- | - | -\n\t----------\n\t"
        "- | - | -\n"
    )
    assert Board().render() == expected


def test_render_shows_marks():
    board = Board()
    board.place(1, "X")
    board.place(9, "O")
    lines = board.render().split("\n")
    assert lines[1] == "\tX | - | -"
    assert lines[5] == "\t- | - | O"


def test_machine_move_uses_free_cell():
    board = Board()
    rng = random.Random(7)
    for _ in range(9):
        free_before = board.free_cells()
        cell = machine_move(board, rng)
        assert cell in free_before
        assert board.cells[cell - 1] == "O"
    assert board.is_full()


def test_machine_move_retries_taken_cells():
    board = Board()
    board.place(2, "X")
    assert machine_move(board, _FixedRng(2, 2, 6)) == 6


def test_machine_move_on_full_board_raises():
    with pytest.raises(ValueError):
        machine_move(Board(list("XOXXOOOXX")))


@pytest.mark.parametrize("draw, first", [(2, True), (8, True), (1, False), (9, False)])
def test_toss(draw, first):
    assert toss(_FixedRng(draw)) is first


def test_scores_round_trip(tmp_path):
    path = tmp_path / "record.txt"
    write_scores(path, (3, 1, 2))
    assert read_scores(path) == (3, 1, 2)


def test_scores_file_format(tmp_path):
    path = tmp_path / "record.txt"
    write_scores(path, (0, 0, 0))
    assert path.read_text() == "0 0 0 0"


def test_read_scores_missing_file(tmp_path):
    assert read_scores(tmp_path / "absent.txt") == (0, 0, 0)


def test_read_scores_partial_file(tmp_path):
    path = tmp_path / "record.txt"
    path.write_text("4")
    assert read_scores(path) == (4, 0, 0)