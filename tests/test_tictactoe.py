import io

import pytest

from algolab.tictactoe import (
    CELL_MAX,
    EMPTY,
    CellOccupiedError,
    InvalidCellError,
    format_board,
    get_winner,
    has_free_cell,
    main,
    new_board,
    place,
)


def _board_with(cells, mark):
    board = new_board()
    for cell in cells:
        place(board, cell, mark)
    return board


def test_new_board_is_empty():
    board = new_board()
    assert all(mark == EMPTY for row in board for mark in row)
    assert has_free_cell(board)
    assert get_winner(board) == EMPTY


@pytest.mark.parametrize(
    "cells",
    [
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        (0, 4, 8),
        (2, 4, 6),
    ],
)
@pytest.mark.parametrize("mark", ["X", "O"])
def test_every_line_wins(cells, mark):
    assert get_winner(_board_with(cells, mark)) == mark


def test_two_in_a_row_does_not_win():
    assert get_winner(_board_with((0, 1), "X")) == EMPTY


def test_full_board_without_winner():
    board = [list("XOX"), list("XOO"), list("OXX")]
    assert not has_free_cell(board)
    assert get_winner(board) == EMPTY


@pytest.mark.parametrize("cell", [-1, CELL_MAX + 1])
def test_place_rejects_invalid_cell(cell):
    with pytest.raises(InvalidCellError):
        place(new_board(), cell, "X")


def test_place_rejects_occupied_cell():
    board = _board_with((4,), "X")
    with pytest.raises(CellOccupiedError):
        place(board, 4, "O")
    assert board[1][1] == "X"


def test_place_sets_the_numbered_cell():
    board = new_board()
    place(board, 5, "O")
    assert board[5 // 3][5 % 3] == "O"
    assert sum(row.count("O") for row in board) == 1


def test_format_board_numbers_cells():
    text = format_board(_board_with((0,), "X"))
    assert "\t | 0: X " in text
    assert "\t | 8: - " in text
    assert text.count("\t" + "." * 48 + "\n") == 4


def test_main_x_wins(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 3 1 4 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Gano X!\n")


def test_main_draw(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 1 2 4 3 5 7 6 8\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Empate!\n")


def test_main_reports_occupied_and_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0 9 3 1 4 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Celda ocupada!" in out
    assert "Celda invalida!" in out
    assert out.endswith("Gano X!\n")


def test_main_fails_on_non_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "Error al leer un numero desde teclado" in capsys.readouterr().out