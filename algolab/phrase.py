"""Reassemble a phrase from letters tagged with their positions."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterable, Sequence

MAX_SIZE = 1000

_ENTRY = re.compile(r"\s*(\d+)\s*->\s*\*(.)\*\s*", re.DOTALL)

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
)


class PhraseFormatError(ValueError):
    """The input does not describe a phrase."""


def parse_entries(text: str, max_size: int = MAX_SIZE) -> list[tuple[int, str]]:
    """Parse lines of the form ``<index> -> *<letter>*``.

    At most ``max_size`` entries are read; every index must be below
    ``max_size``.
    """
    if not text.strip():
        raise PhraseFormatError("Invalid format")
    entries: list[tuple[int, str]] = []
    position = 0
    while position < len(text) and len(entries) < max_size:
        match = _ENTRY.match(text, position)
        if match is None:
            raise PhraseFormatError("Invalid format")
        index = int(match.group(1))
        if index >= max_size:
            raise PhraseFormatError("Inserted index is bigger than the max allowed size")
        entries.append((index, match.group(2)))
        position = match.end()
    return entries


def read_entries(path: str | os.PathLike[str], max_size: int = MAX_SIZE) -> list[tuple[int, str]]:
    """Read a phrase file; see :func:`parse_entries` for the format."""
    with open(path, encoding="utf-8") as handle:
        return parse_entries(handle.read(), max_size)


def assemble(entries: Iterable[tuple[int, str]]) -> str:
    """Put each letter at its index; the first entry for an index wins."""
    letters: dict[int, str] = {}
    count = 0
    for index, letter in entries:
        letters.setdefault(index, letter)
        count += 1
    try:
        return "".join(letters[i] for i in range(count))
    except KeyError as exc:
        raise PhraseFormatError(f"missing index {exc.args[0]}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Read a phrase file and print the assembled phrase in quotes."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "phrase"
        print(_HELP.format(program=program), end="")
        return 1
    try:
        phrase = assemble(read_entries(args[0]))
    except OSError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except PhraseFormatError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f'"{phrase}"\n')
    return 0