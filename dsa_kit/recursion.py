"""Small recursive problems: string reversal, triangular numbers, grid paths."""

from math import comb


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def nth_triangular(n: int) -> int:
    """Return the n-th triangular number, 1 + 2 + ... + n, for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return n * (n + 1) // 2


def unique_paths(n: int, m: int) -> int:
    """Count monotone right/down paths across an n-by-m grid."""
    if n < 1 or m < 1:
        raise ValueError("grid dimensions must be at least 1")
    return comb(n + m - 2, n - 1)