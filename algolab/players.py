"""Tennis ranking records: loading, printing and sorting by rank."""

from __future__ import annotations

import os
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import MutableSequence, Sequence

from algolab.sorting import quick_sort

MAX_NAME_LENGTH = 100
MAX_COUNTRY_LENGTH = 3

_FIELDS = 6

_HELP = (
    "Usage: {program} <input file path>\n\n"
    "Sort an array given in a file in disk.\n"
    "\n"
    "The input file must have the following format:\n"
    " * Each line must contain the name of a player"
    " without spaces followed by a three-letter country"
    " code, the rank of the player, his age, his atp points"
    " and the number of tournaments played during the year.\n"
    " * Values must be separated by one or more spaces.\n"
    " * Numeric values must be natural numbers.\n\n"
)


class PlayerFormatError(ValueError):
    """The text does not describe a list of players."""


@dataclass
class Player:
    """A tennis player's position in the ranking."""

    name: str
    country: str
    rank: int
    age: int
    points: int
    tournaments: int

    def format(self) -> str:
        """Render the player as one line of the input format."""
        return (
            f"{self.name} {self.country} {self.rank} {self.age} "
            f"{self.points} {self.tournaments}"
        )


def _bounded(token: str, max_length: int) -> str:
    if len(token) > max_length:
        raise PlayerFormatError(f"Max string length reached: {max_length + 1}")
    return token


def _unsigned(token: str) -> int:
    try:
        value = int(token)
    except ValueError as exc:
        raise PlayerFormatError("Invalid array.") from exc
    if value < 0:
        raise PlayerFormatError("Invalid array.")
    return value


def parse_players(text: str) -> list[Player]:
    """Parse records of name, country, rank, age, points and tournaments."""
    tokens = text.split()
    if not tokens:
        raise PlayerFormatError("Invalid array.")
    players = []
    for start in range(0, len(tokens), _FIELDS):
        record = tokens[start : start + _FIELDS]
        name = _bounded(record[0], MAX_NAME_LENGTH)
        country = _bounded(record[1], MAX_COUNTRY_LENGTH) if len(record) > 1 else ""
        if len(record) != _FIELDS:
            raise PlayerFormatError("Invalid array.")
        rank, age, points, tournaments = (_unsigned(token) for token in record[2:])
        players.append(Player(name, country, rank, age, points, tournaments))
    return players


def read_players(path: str | os.PathLike[str]) -> list[Player]:
    """Read a players file; see :func:`parse_players` for the format."""
    with open(path, encoding="utf-8") as handle:
        return parse_players(handle.read())


def format_players(players: Sequence[Player]) -> str:
    """Render every player on its own line."""
    return "".join(player.format() + "\n" for player in players)


def goes_before(x: Player, y: Player) -> bool:
    """Order players by ascending rank."""
    return x.rank <= y.rank


def sort_players(players: MutableSequence[Player]) -> None:
    """Sort ``players`` in place by rank with quicksort."""
    quick_sort(players, goes_before)


def is_sorted(players: Sequence[Player]) -> bool:
    """Tell whether the players are in ascending rank order."""
    return all(goes_before(a, b) for a, b in zip(players, players[1:]))


def is_permutation_of(a: Sequence[Player], b: Sequence[Player]) -> bool:
    """Tell whether both sequences hold the same player names, as often each."""
    return len(a) == len(b) and Counter(p.name for p in a) == Counter(p.name for p in b)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a players file, sort it by rank and print it with the time taken."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "players"
        print(_HELP.format(program=program), end="")
        return 1
    try:
        players = read_players(args[0])
    except OSError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except PlayerFormatError as exc:
        print(exc, file=sys.stderr)
        return 1

    original = list(players)
    start = time.process_time()
    sort_players(players)
    used = time.process_time() - start
    print(format_players(players), end="")
    print(f"\ncpu time used to sort the array: {used:f} seconds.")
    assert is_sorted(players)
    assert is_permutation_of(original, players)
    return 0