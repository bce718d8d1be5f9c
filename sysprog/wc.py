"""Count lines, words and characters of standard input."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Union

_WHITESPACE_TEXT = frozenset(" \t\n\v\f\r")
_WHITESPACE_BYTES = frozenset(b" \t\n\v\f\r")


@dataclass(frozen=True)
class Counts:
    """Numbers of lines, words and characters."""

    lines: int = 0
    words: int = 0
    chars: int = 0


def count(text: Union[bytes, str]) -> Counts:
    """Count newlines, words and characters in text.

    A word is a maximal run of non-whitespace characters, whitespace
    being space, tab, newline, vertical tab, form feed and carriage
    return. For bytes, each byte is one character.
    """
    if isinstance(text, (bytes, bytearray)):
        whitespace, newline = _WHITESPACE_BYTES, ord("\n")
    else:
        whitespace, newline = _WHITESPACE_TEXT, "\n"

    lines = words = chars = 0
    in_word = False
    for ch in text:
        chars += 1
        if ch in whitespace:
            if in_word:
                words += 1
                in_word = False
        else:
            in_word = True
        if ch == newline:
            lines += 1
    if in_word:
        words += 1
    return Counts(lines, words, chars)


def format_counts(counts: Counts) -> str:
    """Render counts as three right-aligned fields of width seven."""
    return f"{counts.lines:7d} {counts.words:7d} {counts.chars:7d}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read standard input and write its counts to standard output."""
    data = sys.stdin.buffer.read()
    sys.stdout.write(format_counts(count(data)) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())