"""
strsim.errors — exceptions raised by the metrics.
"""

from __future__ import annotations


class StrSimError(Exception):
    """Base class for every error raised by strsim."""


class DifferentLengthArgs(StrSimError, ValueError):
    """Raised by :mod:`strsim.distance.Hamming` when the inputs differ in length.

    Hamming distance is only defined for sequences with the same number of
    scalar values, so the comparison is refused instead of returning a
    sentinel distance.
    """

    def __init__(self, len1: int, len2: int) -> None:
        self.len1 = len1
        self.len2 = len2
        super().__init__(
            f"Hamming distance needs equal-length arguments, got {len1} and {len2}"
        )


__all__ = ["StrSimError", "DifferentLengthArgs"]
