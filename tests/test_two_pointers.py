from collections import Counter
from itertools import combinations

from hypothesis import given
from hypothesis import strategies as st

from arraykit.two_pointers import (
    is_palindrome,
    max_area,
    three_sum,
    trap,
    two_sum_sorted,
)

small_ints = st.integers(-50, 50)
heights = st.lists(st.integers(0, 30), max_size=30)


# two_sum_sorted


def test_two_sum_sorted_example():
    assert two_sum_sorted([2, 7, 11, 15], 9) == [1, 2]


def test_two_sum_sorted_no_pair():
    assert two_sum_sorted([1, 2, 3], 100) == []


@given(st.lists(small_ints, max_size=25), small_ints)
def test_two_sum_sorted_result_is_valid(values, target):
    numbers = sorted(values)
    result = two_sum_sorted(numbers, target)
    if result:
        first, second = result
        assert 1 <= first < second <= len(numbers)
        assert numbers[first - 1] + numbers[second - 1] == target
    else:
        assert all(a + b != target for a, b in combinations(numbers, 2))


# is_palindrome


def test_is_palindrome_sentence():
    assert is_palindrome("A man, a plan, a canal: Panama")


def test_is_palindrome_rejects_mismatch():
    assert not is_palindrome("race a car")


def test_is_palindrome_ignores_non_ascii():
    assert is_palindrome("ab\u00e9a")


@given(st.text(alphabet="abcXYZ019 ,.!", max_size=20))
def test_is_palindrome_mirrored_text(text):
    assert is_palindrome(text + text[::-1])
    assert is_palindrome(text.upper() + text[::-1].lower())


@given(st.text(max_size=20))
def test_is_palindrome_symmetric_under_reversal(text):
    assert is_palindrome(text) == is_palindrome(text[::-1])


# max_area


def test_max_area_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@given(st.lists(st.integers(0, 30), max_size=1))
def test_max_area_needs_two_walls(height):
    assert max_area(height) == 0


@given(st.lists(st.integers(0, 30), min_size=2, max_size=30))
def test_max_area_bounds(height):
    result = max_area(height)
    areas = {
        min(height[i], height[j]) * (j - i)
        for i, j in combinations(range(len(height)), 2)
    }
    assert result in areas
    assert result >= min(height[0], height[-1]) * (len(height) - 1)
    assert all(result >= min(a, b) for a, b in zip(height, height[1:]))


@given(st.lists(st.integers(0, 30), min_size=2, max_size=30))
def test_max_area_reversal_invariant(height):
    assert max_area(height) == max_area(height[::-1])


# three_sum


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@given(st.lists(small_ints, max_size=25))
def test_three_sum_invariants(nums):
    original = list(nums)
    result = three_sum(nums)
    assert nums == original
    available = Counter(nums)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
        assert not Counter(triplet) - available
    assert len({tuple(t) for t in result}) == len(result)
    assert result == sorted(result)


@given(st.lists(small_ints, max_size=25))
def test_three_sum_finds_every_triplet(nums):
    found = {tuple(t) for t in three_sum(nums)}
    for combo in combinations(nums, 3):
        if sum(combo) == 0:
            assert tuple(sorted(combo)) in found


# trap


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@given(heights)
def test_trap_reversal_invariant(height):
    assert trap(height) == trap(height[::-1])


@given(heights, st.integers(0, 20))
def test_trap_shift_invariant(height, shift):
    assert trap([h + shift for h in height]) == trap(height)


@given(heights)
def test_trap_bounds(height):
    water = trap(height)
    assert water >= 0
    if height:
        assert water <= sum(max(height) - h for h in height)


@given(heights)
def test_trap_monotone_holds_nothing(height):
    assert trap(sorted(height)) == 0
    assert trap(sorted(height, reverse=True)) == 0