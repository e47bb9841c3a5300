# arraykit

Plain functions over Python lists and strings for classic array, hashing,
string, Sudoku and two-pointer problems. There are no runtime dependencies.

The test suite uses pytest and hypothesis, which the `test` extra installs.

## Modules

### `arraykit.hashing`

- `contains_duplicate(nums)`: `True` if any value occurs more than once.
- `two_sum(nums, target)`: indices `[i, j]` of two different positions whose
  values add up to `target`, or an empty list if there is no such pair.
  Entries are considered in order of value (ties by position), and each is
  paired with the earliest position holding its complement.
- `is_anagram(s, t)`: `True` if `t` is a rearrangement of the characters of `s`.
- `group_anagrams(strs)`: lists of words that are anagrams of each other.
  Groups come in order of their first member; words keep their input order.
- `product_except_self(nums)`: for each position, the product of all other
  entries, computed from prefix and suffix products without division.
  An empty input gives an empty list.
- `top_k_frequent(nums, k)`: the `k` most frequent values, most frequent first,
  ties ordered by first appearance. `k <= 0` gives an empty list; a `k` larger
  than the number of distinct values raises `ValueError`.
- `longest_consecutive(nums)`: length of the longest run of consecutive
  integers present in `nums`.

### `arraykit.codec`

- `encode(strs)`: packs strings into one string of `<length>#<text>` records.
- `decode(data)`: unpacks such a string back into the list. Malformed data
  (a missing `#`, a length field that is not digits, or a record longer than
  what remains) raises `ValueError`.

```python
from arraykit.codec import encode, decode

packed = encode(["hello", "a#b", ""])   # '5#hello3#a#b0#'
assert decode(packed) == ["hello", "a#b", ""]
```

### `arraykit.sudoku`

- `is_valid_sudoku(board)`: checks a 9×9 board for a repeated value in any row,
  column or 3×3 box. Cells holding `"."` are empty; any other value counts as
  filled. Rows may be lists of single characters or strings of nine characters.
  Only the filled cells are checked; the board need not be solvable. A board
  that is not 9 by 9 raises `ValueError`.

### `arraykit.two_pointers`

- `two_sum_sorted(numbers, target)`: 1-based positions of two entries of a
  sorted list that add up to `target`, or an empty list.
- `is_palindrome(s)`: palindrome check over the ASCII letters and digits of `s`,
  ignoring case; every other character is skipped.
- `max_area(height)`: the largest area of water held between two of the lines.
- `three_sum(nums)`: every distinct ascending triplet summing to zero, ordered by
  first and then second entry. The input list is not modified.
- `trap(height)`: total units of rainwater held by an elevation map.

```python
from arraykit.two_pointers import trap, three_sum

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
three_sum([-1, 0, 1, 2, -1, -4])             # [[-1, -1, 2], [-1, 0, 1]]
```

## What it does not do

arraykit is a library only: it has no command-line interface, and it does not
solve Sudoku boards, it only checks them.