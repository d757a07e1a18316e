"""Small string utilities: lowercasing, line reading, squeezing, searching."""

from __future__ import annotations

import argparse
import string
import sys
from typing import TextIO

LIMIT = 100
STRING_MAX = 32
ANY_MAX = 127

_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def lower(s: str) -> str:
    """Lowercase the ASCII letters A-Z, leaving everything else alone."""
    return s.translate(_LOWER_TABLE)


def read_line(stream: TextIO, limit: int = LIMIT) -> str:
    """Read at most ``limit - 1`` characters up to a newline or end of input.

    The newline is consumed but not returned. When the limit is reached one
    further character is consumed and discarded.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    chars: list[str] = []
    while True:
        at_limit = len(chars) == limit - 1
        ch = stream.read(1)
        if at_limit or ch in ("", "\n"):
            return "".join(chars)
        chars.append(ch)


def squeeze(s: str, remove: str) -> str:
    """Return ``s`` without any character that occurs in ``remove``."""
    dropped = set(remove)
    return "".join(ch for ch in s if ch not in dropped)


def any_index(s: str, chars: str) -> int:
    """Return the first index in ``s`` of any character of ``chars``, or -1."""
    wanted = set(chars)
    return next((i for i, ch in enumerate(s) if ch in wanted), -1)


def _get_line(stream: TextIO, limit: int | None = None) -> str:
    chars: list[str] = []
    while limit is None or len(chars) < limit:
        ch = stream.read(1)
        if ch in ("", "\n"):
            break
        chars.append(ch)
    return "".join(chars)


def squeeze_main(argv: list[str] | None = None) -> int:
    """Prompt for a string and characters to remove, then print the result."""
    argparse.ArgumentParser(
        prog="squeeze", description="Remove characters from a string."
    ).parse_args(argv)
    sys.stdout.write(f"Enter a string ({STRING_MAX} characters max): ")
    sys.stdout.flush()
    s = _get_line(sys.stdin)
    sys.stdout.write("Enter all characters to remove from the previous string: ")
    sys.stdout.flush()
    remove = _get_line(sys.stdin)
    squeezed = squeeze(s[:STRING_MAX], remove[:STRING_MAX])
    sys.stdout.write(f"The squeezed line is: [{squeezed}]\n")
    return 0


def any_main(argv: list[str] | None = None) -> int:
    """Prompt for a string and a filter and report the first match."""
    argparse.ArgumentParser(
        prog="any", description="Find the first character matching a filter."
    ).parse_args(argv)
    sys.stdout.write(f"Enter a string (max {ANY_MAX} characters): ")
    sys.stdout.flush()
    main_string = _get_line(sys.stdin, ANY_MAX)
    sys.stdout.write(f"Enter a filter to check against (max {ANY_MAX} characters): ")
    sys.stdout.flush()
    chars = _get_line(sys.stdin, ANY_MAX)
    index = any_index(main_string, chars)
    if index > -1:
        sys.stdout.write(f"The first match is at index {index}.\n")
    else:
        sys.stdout.write(
            f"No characters in the main string match the filter [{chars}].\n"
        )
    return 0