"""Break long input into lines of a fixed column width."""

from __future__ import annotations

import argparse
import sys

COLUMN_LENGTH = 8
MAX_LINE = 100

_BLANKS = (" ", "\t")


def fold(text: str, width: int = COLUMN_LENGTH) -> str:
    """Fold ``text`` into lines of ``width`` columns.

    Blanks are held back and written as spaces only once a following
    non-blank character appears, so trailing blanks vanish. Newlines in the
    input take up a column but are not copied. The result always ends with
    a newline.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    pieces = []
    col = 1
    blank_start = None
    for i, ch in enumerate(text):
        if ch in _BLANKS:
            if blank_start is None:
                blank_start = i
        elif ch != "\n":
            if blank_start is not None:
                pieces.append(" " * (i - blank_start))
                blank_start = None
            pieces.append(ch)
        col += 1
        if col > width:
            pieces.append("\n")
            col = 1
    pieces.append("\n")
    return "".join(pieces)


def main(argv: list[str] | None = None) -> int:
    """Fold up to MAX_LINE characters of standard input."""
    argparse.ArgumentParser(
        prog="fold", description="Fold long input into short lines."
    ).parse_args(argv)
    line = sys.stdin.read(MAX_LINE)[:-1]
    sys.stdout.write(fold(line))
    return 0