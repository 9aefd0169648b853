"""Bounded strings compared character by character."""

from __future__ import annotations

from typing import Sequence

FIXSTRING_MAX = 100

_DEMO_WORDS = ("hola", "mundo", "auto", "automovil")


def _content(s: str) -> str:
    return s.partition("\0")[0]


def fstring_length(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_content(s))


def fstring_eq(s1: str, s2: str) -> bool:
    """Tell whether both strings have the same content."""
    return _content(s1) == _content(s2)


def fstring_less_eq(s1: str, s2: str) -> bool:
    """Compare alphabetically over the shared length.

    Only the characters both strings have are compared, so a string and
    any of its prefixes are each less than or equal to the other.
    """
    for c1, c2 in zip(_content(s1), _content(s2)):
        if c1 != c2:
            return c1 < c2
    return True


def fstring_set(s: str) -> str:
    """Return a copy of ``s`` cut to what a fixed string can hold."""
    return _content(s)[: FIXSTRING_MAX - 1]


def main(argv: Sequence[str] | None = None) -> int:
    """Show the string helpers on a few sample words."""
    words = _DEMO_WORDS
    print("Probando fstring_length()\n-------------------------\n")
    for word in words:
        print(f"La longitud de '{word}' es {fstring_length(word)}")
    print("\nProbando fstring_eq() y fstring_less_eq()\n-----------------------------------------\n")
    for first in words:
        for second in words:
            if fstring_eq(first, second):
                print(f"Los strings '{first}' y '{second}' son iguales")
            order = "antes" if fstring_less_eq(first, second) else "despues"
            print(f"El string '{first}' va {order} alfabeticamente que '{second}'\n")
    return 0