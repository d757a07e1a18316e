"""Convert between tab characters and runs of spaces."""

from __future__ import annotations

import argparse
import sys

TAB_LENGTH = 8
MAX_LENGTH = 100


def _check_tab_length(tab_length: int) -> None:
    if tab_length < 1:
        raise ValueError(f"tab length must be at least 1, got {tab_length}")


def detab(text: str, tab_length: int = TAB_LENGTH) -> str:
    """Replace each tab with spaces up to the next tab stop.

    Columns restart after every newline.
    """
    _check_tab_length(tab_length)
    pieces = []
    col = 1
    for ch in text:
        if ch == "\t":
            pieces.append(" " * (tab_length - col + 1))
            col = 1
        else:
            pieces.append(ch)
            col = 1 if ch == "\n" or col >= tab_length else col + 1
    return "".join(pieces)


def entab(text: str, tab_length: int = TAB_LENGTH) -> str:
    """Collapse spaces at the end of a tab-length segment.

    The text is scanned in segments of ``tab_length`` characters, each new
    segment starting one character past the end of the previous one. Only a
    segment that is followed by more text is considered. The first such
    segment that ends in a space decides the result: if it holds exactly one
    space, that space becomes a tab; otherwise the characters from its first
    space onward are shifted left by one less than its number of spaces.
    No further segments are examined after that.
    """
    _check_tab_length(tab_length)
    start = 0
    while start + tab_length < len(text):
        segment = text[start:start + tab_length]
        if segment.endswith(" "):
            first = start + segment.index(" ")
            shift = segment.count(" ") - 1
            if shift == 0:
                return text[:first] + "\t" + text[first + 1:]
            return text[:first] + text[first + shift:]
        start += tab_length + 1
    return text


def _parser(prog: str, description: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog=prog, description=description)


def detab_main(argv: list[str] | None = None) -> int:
    """Expand tabs read from standard input onto standard output."""
    _parser("detab", "Replace tabs with spaces.").parse_args(argv)
    sys.stdout.write(detab(sys.stdin.read()))
    return 0


def entab_main(argv: list[str] | None = None) -> int:
    """Entab one line of at most MAX_LENGTH characters from standard input."""
    _parser("entab", "Replace runs of spaces with tabs.").parse_args(argv)
    line = sys.stdin.read(MAX_LENGTH)[:-1]
    sys.stdout.write("The entabbed line is:\n")
    sys.stdout.write(entab(line))
    return 0