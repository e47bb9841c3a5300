"""Array and hashing routines built on sets, dictionaries and counters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from itertools import accumulate
from operator import mul


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Return True if any value appears more than once."""
    seen: set[Hashable] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two distinct entries summing to ``target``.

    Entries are scanned in order of value, ties broken by position. For each
    entry the partner is the earliest position holding the complement. The
    first entry whose partner is a different position wins. An empty list
    means no such pair exists.
    """
    entries = sorted((value, index) for index, value in enumerate(nums))
    first_index: dict[int, int] = {}
    for value, index in entries:
        first_index.setdefault(value, index)
    for value, index in entries:
        partner = first_index.get(target - value)
        if partner is not None and partner != index:
            return [index, partner]
    return []


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group strings that are anagrams of one another.

    Groups appear in order of their first member; members keep input order.
    """
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other entry."""
    prefixes = list(accumulate(nums[:-1], mul, initial=1)) if nums else []
    suffixes = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1] if nums else []
    return [before * after for before, after in zip(prefixes, suffixes)]


def top_k_frequent(nums: Iterable[Hashable], k: int) -> list[Hashable]:
    """Return the ``k`` most frequent values, most frequent first.

    Values with equal counts are ordered by first appearance. Raises
    ValueError if fewer than ``k`` distinct values exist.
    """
    counts = Counter(nums)
    if k <= 0:
        return []
    if k > len(counts):
        raise ValueError(
            f"requested {k} most frequent values but only {len(counts)} are distinct"
        )
    return [value for value, _ in counts.most_common(k)]


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start + 1
        while end in values:
            end += 1
        longest = max(longest, end - start)
    return longest