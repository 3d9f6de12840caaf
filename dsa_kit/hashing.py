"""Array and hashing problems: duplicates, anagrams, frequency and pair sums."""

from collections import Counter
from collections.abc import Iterable, Sequence


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Report whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def _letter_counts(word: str) -> tuple[int, ...]:
    counts = [0] * 26
    for ch in word:
        offset = ord(ch) - ord("a")
        if not 0 <= offset < 26:
            raise ValueError(f"unexpected character {ch!r} in {word!r}")
        counts[offset] += 1
    return tuple(counts)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group lowercase words that are anagrams of each other.

    Groups appear in order of their first word; words keep their input order.
    Raises ValueError for characters outside a-z.
    """
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in strs:
        groups.setdefault(_letter_counts(word), []).append(word)
    return list(groups.values())


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Ties keep the order in which values first appeared.
    """
    if k <= 0:
        return []
    return [value for value, _ in Counter(nums).most_common(k)]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``j < i`` and ``nums[i] + nums[j] == target``.

    Returns an empty list when no such pair exists.
    """
    positions: dict[int, int] = {}
    for i, value in enumerate(nums):
        j = positions.get(target - value)
        if j is not None:
            return [i, j]
        positions[value] = i
    return []


def is_anagram(s: str, t: str) -> bool:
    """Report whether ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)