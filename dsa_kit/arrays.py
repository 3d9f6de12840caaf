"""Searching over sorted integer sequences."""

from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the sorted ``nums``, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1