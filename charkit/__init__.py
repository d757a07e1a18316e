"""Small text filters (tabs, folding, hex parsing, string helpers) and bit-manipulation helpers."""

__version__ = "0.1.0"
__all__ = ["bits", "fold", "hexconv", "ranges", "strings", "tabs"]