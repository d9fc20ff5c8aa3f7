# algodrills

Compact solutions to classic array, matrix and string exercises of the kind
you meet in algorithm practice and coding interviews. Each one is a plain
function. It takes ordinary Python values and returns a result. It does not
print anything and does not change its arguments.

## Installation

```
pip install algodrills
```

To run the test suite as well:

```
pip install "algodrills[test]"
pytest
```

## Modules

### `algodrills.arrays`

| Function | What it does |
| --- | --- |
| `two_sum(nums, target)` | Scans left to right. Returns `(later_index, earlier_index)` for the first pair that adds up to `target`, or `None` if no pair does. |
| `rotate_right(nums, k)` | Returns a new list rotated `k` places to the right. `k` must be between `0` and `len(nums)`, otherwise `ValueError`. |
| `move_zeroes_to_end(nums)` | Moves zeros to the end and keeps the order of the other values. |
| `max_profit(prices)` | Gives the best profit from one buy followed by one later sell. Returns `0` when no sale makes money and raises `ValueError` for no prices. |
| `maximum(values)` | Gives the largest value. Raises `ValueError` when empty. |
| `longest_consecutive(nums)` | Gives the length of the longest run of consecutive integers present. |
| `majority_elements(nums)` | Lists the values that occur more than `len(nums) // 2` times. |
| `max_consecutive_ones(nums)` | Gives the length of the longest unbroken run of `1`s. |
| `missing_number(nums)` | Gives the value from `0..len(nums)` that is absent. |
| `rearrange_by_sign(nums)` | Puts positive values at even positions and the others at odd positions, keeping order within each group. Raises `ValueError` when the counts do not alternate. |
| `sort_colors(nums)` | Sorts a sequence made only of `0`, `1` and `2`. Raises `ValueError` for any other value. |
| `single_number(nums)` | Finds the value left over when all the others pair up (XOR of all values). |
| `count_subarrays_with_sum(nums, k)` | Counts the contiguous, non-empty slices that sum to `k`. |

### `algodrills.matrix`

A matrix is a sequence of equal-length rows. Rows of different lengths raise
`ValueError`.

| Function | What it does |
| --- | --- |
| `rotate_clockwise(matrix)` | Returns a square matrix rotated 90 degrees clockwise. A non-square matrix raises `ValueError`. |
| `set_zeroes(matrix)` | Returns a copy in which every row and column holding a zero is zeroed. |
| `spiral_order(matrix)` | Lists the values clockwise from the top-left, spiralling inward. An empty matrix gives `[]`. |

### `algodrills.strings`

| Function | What it does |
| --- | --- |
| `is_isomorphic(s, t)` | Checks whether the characters of `s` map one-to-one onto those of `t`. |
| `largest_odd_number(s)` | Gives the longest prefix of a digit string that ends in an odd digit, or `""` if there is none. Non-digits raise `ValueError`. |
| `is_rotation(s, goal)` | Checks whether `goal` is a cyclic shift of `s`. |
| `is_anagram(s, t)` | Checks whether the two strings hold the same characters the same number of times. |
| `beauty_sum(s)` | Adds up the highest minus the lowest character frequency over every substring. |
| `sort_by_frequency(s)` | Groups characters from most to least frequent. Ties keep the order of first appearance. |
| `longest_common_prefix(strs)` | Gives the longest prefix shared by all the strings, or `""` for an empty list. |
| `max_nesting_depth(s)` | Gives the deepest parenthesis nesting reached. |
| `remove_outer_parentheses(s)` | Drops the outermost pair of every primitive group. Only parentheses are kept. |
| `reverse_words(s)` | Reverses the order of whitespace-separated words and joins them with single spaces. |
| `roman_to_int(s)` | Converts a Roman numeral to an integer. Unknown characters count as zero. |

## Example

```python
from algodrills.arrays import two_sum, rotate_right
from algodrills.matrix import spiral_order
from algodrills.strings import roman_to_int, reverse_words

two_sum([2, 4, 3, 5, 1, 8, 6], 10)             # (5, 0)
rotate_right([1, 2, 3, 4, 5, 6, 7, 8, 9], 3)   # [7, 8, 9, 1, 2, 3, 4, 5, 6]
spiral_order([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
# [1, 2, 3, 4, 8, 12, 11, 10, 9, 5, 6, 7]
roman_to_int("LVIII")                          # 58
reverse_words("who are we")                    # "we are who"
```

## What it does not do

The package is a library of functions only. It has no command-line program
and reads no input from the terminal or from files. To use a function, import
it and call it from Python.