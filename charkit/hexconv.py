"""Convert hexadecimal strings of up to eight digits to integers."""

from __future__ import annotations

import argparse
import sys

MAX_LEN = 10
HEX_BASE = 16

_DIGITS = "0123456789"
_LOWER = "abcdef"
_UPPER = "ABCDEF"
_HEX_CHARS = frozenset(_DIGITS + _LOWER + _UPPER)

_INVALID_MESSAGE = (
    "The specified string is invalid as a hexidecimal input. It "
    "must be presented in the format of: \n\n\t[0x]NNNNNNNN\n\nWhere "
    "0x is optional and NNNNNNNN is 1 to 8 hexadecimal digits in the "
    "range of 0-9 and A-F, case-insensitive.\n"
)


def _has_prefix(s: str) -> bool:
    return len(s) >= 2 and s[0] == "0" and s[1] in "xX"


def validate_hex(s: str) -> bool:
    """Return True if ``s`` is ``[0x]N...`` with 1 to 8 hex digits."""
    if _has_prefix(s):
        min_len, max_len, digits = 3, 10, s[2:]
    else:
        min_len, max_len, digits = 1, 8, s
    if not min_len <= len(s) <= max_len:
        return False
    return all(ch in _HEX_CHARS for ch in digits)


def calculate_value(c: str) -> int:
    """Return the value of a single hexadecimal digit."""
    for alphabet, offset in ((_DIGITS, 0), (_LOWER, 10), (_UPPER, 10)):
        if len(c) == 1 and c in alphabet:
            return alphabet.index(c) + offset
    raise ValueError(f"not a hexadecimal digit: {c!r}")


def calculate_hex(s: str) -> int:
    """Return the value of a hex string, skipping an optional 0x prefix.

    The string is expected to have passed :func:`validate_hex`.
    """
    digits = s[2:] if len(s) > 1 and s[1] in "xX" else s
    value = 0
    for exp, ch in enumerate(reversed(digits)):
        value += calculate_value(ch) * HEX_BASE**exp
    return value


def htoi(s: str) -> int:
    """Validate ``s`` and return its value; raise ValueError if invalid."""
    if not validate_hex(s):
        raise ValueError(f"invalid hexadecimal input: {s!r}")
    return calculate_hex(s)


def _read_input(stream) -> str:
    chars = []
    while len(chars) < MAX_LEN:
        ch = stream.read(1)
        if ch in ("", "\n"):
            break
        chars.append(ch)
    return "".join(chars)


def main(argv: list[str] | None = None) -> int:
    """Read a hex string from standard input and print its value."""
    argparse.ArgumentParser(
        prog="htoi", description="Convert a hexadecimal string to an integer."
    ).parse_args(argv)
    s = _read_input(sys.stdin)
    try:
        value = htoi(s)
    except ValueError:
        sys.stdout.write(_INVALID_MESSAGE)
    else:
        sys.stdout.write(f"The value of the provided hex is {value}.\n")
    return 0