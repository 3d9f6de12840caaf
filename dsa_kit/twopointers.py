"""Two-pointer techniques over integer lists."""

from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is None or price <= lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def move_zeroes(nums: list[int]) -> list[int]:
    """Move every zero to the end in place, keeping other values in order.

    Returns the same list for convenience.
    """
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[write], nums[read] = nums[read], nums[write]
            write += 1
    return nums