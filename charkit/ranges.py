"""Find the value ranges of fixed-width integer types."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

MAX_ATTEMPTS = 100

_TYPES = (
    ("char", 8),
    ("short int", 16),
    ("int", 32),
    ("long int", 64),
)


@dataclass(frozen=True)
class IntRange:
    """Limits of an integer type of a given width."""

    name: str
    bits: int
    unsigned_max: int
    signed_min: int
    signed_max: int


def unsigned_limit(bits: int) -> int:
    """Find the largest unsigned value of ``bits`` bits by provoking overflow.

    Candidates of the form 2**exp - 1, reduced modulo 2**bits, are tried
    until adding one wraps around.
    """
    if bits < 1:
        raise ValueError(f"bit width must be at least 1, got {bits}")
    modulus = 1 << bits
    for exp in range(1, MAX_ATTEMPTS):
        candidate = ((1 << exp) - 1) % modulus
        if (candidate + 1) % modulus < candidate:
            return candidate
    raise ValueError(f"no limit found for {bits} bits within {MAX_ATTEMPTS} attempts")


def signed_limits(bits: int) -> tuple[int, int]:
    """Return the (minimum, maximum) of a two's complement type."""
    half = (unsigned_limit(bits) + 1) // 2
    return -half, half - 1


def measure(name: str, bits: int) -> IntRange:
    """Measure the limits of the type called ``name``."""
    low, high = signed_limits(bits)
    return IntRange(name, bits, unsigned_limit(bits), low, high)


def describe_ranges() -> str:
    """Describe the ranges of char, short, int and long."""
    parts = []
    for name, bits in _TYPES:
        found = measure(name, bits)
        parts.append(f"The limit of an unsigned {name} is {found.unsigned_max}\n")
        parts.append(
            f"The limits of a signed {name} are "
            f"{found.signed_min} and {found.signed_max}\n"
        )
        if name != "char":
            parts.append("\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Print the ranges of the standard integer types."""
    argparse.ArgumentParser(
        prog="ranges", description="Show integer type ranges."
    ).parse_args(argv)
    sys.stdout.write(describe_ranges())
    return 0