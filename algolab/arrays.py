"""Load integer arrays from text, inspect and print them."""

from __future__ import annotations

import os
import sys
from collections import Counter
from typing import Iterator, Sequence, TextIO

MAX_SIZE = 100000

_HELP = (
    "Usage: {program} <input file path>\n\n"
    "Loads an array given in a file in disk and prints it on the screen."
    "\n\n"
    "The input file must have the following format:\n"
    " * The first line must contain only a positive integer,"
    " which is the length of the array.\n"
    " * The second line must contain the members of the array"
    " separated by one or more spaces. Each member must be an integer."
    "\n\n"
    "In other words, the file format is:\n"
    "<amount of array elements>\n"
    "<array elem 1> <array elem 2> ... <array elem N>\n\n"
    "Use '-' as the path to type the array on standard input.\n\n"
)


class ArrayFormatError(ValueError):
    """The text does not describe a valid array."""


def _unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(token)
    return value


def parse_array(text: str, max_size: int = MAX_SIZE) -> list[int]:
    """Parse a length followed by that many integers."""
    tokens = iter(text.split())
    try:
        size = _unsigned(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ArrayFormatError("Invalid array.") from exc
    if size > max_size:
        raise ArrayFormatError(f"Allowed size is {max_size}.")
    values = []
    for _ in range(size):
        try:
            values.append(int(next(tokens)))
        except (StopIteration, ValueError) as exc:
            raise ArrayFormatError("Invalid array.") from exc
    return values


def read_array(path: str | os.PathLike[str], max_size: int = MAX_SIZE) -> list[int]:
    """Read an array file; see :func:`parse_array` for the format."""
    with open(path, encoding="utf-8") as handle:
        return parse_array(handle.read(), max_size)


def format_list(values: Sequence[int]) -> str:
    """Render values as ``[a, b, c]``."""
    return "[" + ", ".join(str(value) for value in values) + "]"


def format_array(values: Sequence[int]) -> str:
    """Render values in the file format read by :func:`parse_array`."""
    text = f"{len(values)}\n"
    if values:
        text += " ".join(str(value) for value in values) + "\n"
    return text


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values are in ascending order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def value_count(values: Sequence[int], value: int) -> int:
    """Count how often ``value`` occurs in ``values``."""
    return sum(1 for element in values if element == value)


def is_permutation_of(a: Sequence[int], b: Sequence[int]) -> bool:
    """Tell whether ``b`` holds exactly the elements of ``a``."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _array_from_stdin(stream: TextIO, max_size: int = MAX_SIZE) -> list[int]:
    tokens = _tokens(stream)
    print(
        f"Ingrese un valor, del 0 al {max_size}, para el largo de su arreglo arreglo:",
        flush=True,
    )
    try:
        size = _unsigned(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ArrayFormatError("El largo ingresado es invalido") from exc
    if size > max_size:
        raise ArrayFormatError("El largo ingresado es invalido")
    values = []
    for position in range(size):
        print(f"ingrese un valor para la posicion {position} del arreglo", flush=True)
        try:
            values.append(int(next(tokens)))
        except (StopIteration, ValueError) as exc:
            raise ArrayFormatError("Se ha ingresado un valor invalido") from exc
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Load an array, print it and tell whether it is sorted."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "arrays"
        print(_HELP.format(program=program), end="")
        return 1
    path = args[0]
    try:
        values = _array_from_stdin(sys.stdin) if path == "-" else read_array(path)
    except OSError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except ArrayFormatError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_list(values))
    print("El arreglo esta ordenado" if is_sorted(values) else "El arreglo esta desordenado")
    return 0