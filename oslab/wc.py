"""Count lines, words and characters of standard input."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence

_SEPARATORS = frozenset(" \t\n")


@dataclass(frozen=True)
class Counts:
    """Line, word and character totals."""

    lines: int
    words: int
    characters: int

    def __str__(self) -> str:
        return f"{self.lines} {self.words} {self.characters}"


def count(text: str) -> Counts:
    """Count newlines, words and characters.

    Words are separated only by spaces, tabs and newlines.
    """
    words = 0
    in_word = False
    for char in text:
        if char in _SEPARATORS:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return Counts(text.count("\n"), words, len(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``lines words characters`` for standard input, counting bytes."""
    data = sys.stdin.buffer.read()
    print(count(data.decode("latin-1")))
    return 0


if __name__ == "__main__":
    sys.exit(main())