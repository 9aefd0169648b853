"""Check whether a value bounds, or belongs to, a small array of integers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TextIO

ARRAY_SIZE = 4


@dataclass(frozen=True)
class BoundData:
    """How a value relates to the elements of an array."""

    is_upperbound: bool
    is_lowerbound: bool
    exists: bool
    where: int | None = None


def check_bound(value: int, values: Sequence[int]) -> BoundData:
    """Compare ``value`` with every element of ``values``.

    ``where`` is the position of the last element equal to ``value``,
    or ``None`` when no element equals it.
    """
    is_upper = True
    is_lower = True
    where: int | None = None
    for position, element in enumerate(values):
        if element > value:
            is_upper = False
        if element < value:
            is_lower = False
        if element == value:
            where = position
    return BoundData(
        is_upperbound=is_upper,
        is_lowerbound=is_lower,
        exists=where is not None,
        where=where,
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ValueError("expected an integer") from exc


def describe(result: BoundData) -> Iterable[str]:
    """Yield the report lines for ``result``."""
    if result.is_upperbound and result.exists:
        yield "El valor es maximo"
        yield f"El valor se encuentra en la posicion {result.where} del arreglo"
    if result.is_upperbound and not result.exists:
        yield "El valor es cota superior"
    if result.is_lowerbound and result.exists:
        yield "El valor es minimo"
        yield f"El valor se encuentra en la posicion {result.where} del arreglo"
    if result.is_lowerbound and not result.exists:
        yield "El valor es cota inferior"


def main(argv: Sequence[str] | None = None) -> int:
    """Read an array and a value from standard input and report bounds."""
    tokens = _tokens(sys.stdin)
    values = []
    try:
        for position in range(ARRAY_SIZE):
            print(f"Ingrese el valor para la posicion {position} del arreglo", flush=True)
            values.append(_read_int(tokens))
        print("Ingrese un valor para comparar", flush=True)
        value = _read_int(tokens)
    except ValueError:
        print("Invalid input.", file=sys.stderr)
        return 1

    for line in describe(check_bound(value, values)):
        print(line)
    return 0