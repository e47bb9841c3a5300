"""Converging two-pointer routines over sequences."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based positions of two entries of sorted ``numbers`` summing to ``target``.

    An empty list means no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return [left + 1, right + 1]
    return []


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same both ways.

    Only ASCII letters and digits are compared, ignoring case.
    """
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]


def max_area(height: Sequence[int]) -> int:
    """Return the largest area held between two of the given wall heights."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        low, high = height[left], height[right]
        best = max(best, min(low, high) * (right - left))
        if low < high:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of entries that sums to zero.

    Triplets appear in ascending order of their first, then second entry.
    The input is left unchanged.
    """
    values = sorted(nums)
    count = len(values)
    triplets: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and values[i - 1] == first:
            continue
        left, right = i + 1, count - 1
        while left < right:
            total = first + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                triplets.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
    return triplets


def trap(height: Sequence[int]) -> int:
    """Return the units of water held between the given wall heights."""
    water = 0
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    while left < right:
        left_max = max(left_max, height[left])
        right_max = max(right_max, height[right])
        if left_max < right_max:
            water += left_max - height[left]
            left += 1
        else:
            water += right_max - height[right]
            right -= 1
    return water