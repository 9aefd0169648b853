"""A two-player game of tic-tac-toe on the terminal."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence, TextIO

EMPTY = "-"
SIZE = 3
CELL_MAX = SIZE * SIZE - 1

Board = list[list[str]]


class InvalidCellError(ValueError):
    """The cell number is outside the board."""


class CellOccupiedError(ValueError):
    """The cell already holds a mark."""


def new_board() -> Board:
    """Return an empty board."""
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def _lines(board: Board) -> Iterator[list[str]]:
    for i in range(SIZE):
        yield list(board[i])
        yield [board[row][i] for row in range(SIZE)]
    yield [board[i][i] for i in range(SIZE)]
    yield [board[i][SIZE - 1 - i] for i in range(SIZE)]


def get_winner(board: Board) -> str:
    """Return the mark that fills a row, column or diagonal, or ``EMPTY``."""
    for line in _lines(board):
        first = line[0]
        if first != EMPTY and all(mark == first for mark in line):
            return first
    return EMPTY


def has_free_cell(board: Board) -> bool:
    """Tell whether any cell is still empty."""
    return any(EMPTY in row for row in board)


def place(board: Board, cell: int, mark: str) -> None:
    """Put ``mark`` on the numbered ``cell`` of ``board``."""
    if not 0 <= cell <= CELL_MAX:
        raise InvalidCellError(f"cell {cell} is outside 0..{CELL_MAX}")
    row, column = divmod(cell, SIZE)
    if board[row][column] != EMPTY:
        raise CellOccupiedError(f"cell {cell} is occupied")
    board[row][column] = mark


def format_board(board: Board) -> str:
    """Render the board with numbered cells."""
    separator = "\t" + "." * 16 * SIZE + "\n"
    parts = [separator]
    for row_index, row in enumerate(board):
        for column, mark in enumerate(row):
            parts.append(f"\t | {row_index * SIZE + column}: {mark} ")
        parts.append("\t | \n")
        parts.append(separator)
    return "".join(parts)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game reading cell numbers from standard input."""
    board = new_board()
    turn = "X"
    winner = EMPTY
    tokens = _tokens(sys.stdin)
    while winner == EMPTY and has_free_cell(board):
        print(format_board(board), end="")
        print(f"\nTurno {turn} - Elija posicion (numero del 0 al {CELL_MAX}):", end="", flush=True)
        try:
            cell = int(next(tokens))
        except (StopIteration, ValueError):
            print("Error al leer un numero desde teclado")
            return 1
        try:
            place(board, cell, turn)
        except InvalidCellError:
            print("\nCelda invalida!")
        except CellOccupiedError:
            print("\nCelda ocupada!")
        else:
            turn = "O" if turn == "X" else "X"
            winner = get_winner(board)
    print(format_board(board), end="")
    if winner == EMPTY:
        print("Empate!")
    else:
        print(f"Gano {winner}!")
    return 0