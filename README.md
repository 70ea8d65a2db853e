# kataset

A collection of small, dependency-free functions that solve well-known
programming puzzles on integer lists, strings, plain integers and binary
trees. The functions take ordinary Python values and return a fresh result;
the one exception is `reverse_string`, which reverses a mutable sequence of
characters in place and returns `None`.

## Modules

- `kataset.arrays`: puzzles over sequences of integers:
  `can_make_arithmetic_progression`, `find_numbers`, `busy_student`,
  `max_product`, `final_prices`, `count_good_triplets`,
  `sum_odd_length_subarrays`, `count_good_rectangles`, `sum_of_unique`,
  `min_operations`, `subset_xor_sum`, `max_product_difference`, `find_gcd`,
  `gcd`, `count_k_difference`, `get_descent_periods`, `array_pair_sum`,
  `sort_array_by_parity`, `repeated_n_times` and `two_sum`.
- `kataset.integers`: `maximum_69_number` and `number_of_matches`.
- `kataset.strings`: puzzles over text: `longest_common_prefix`,
  `generate_the_string`, `dest_city`, `merge_alternately`,
  `square_is_white`, `truncate_sentence`, `check_if_pangram`,
  `replace_digits`, `sort_sentence`, `are_occurrences_equal`,
  `reverse_prefix`, `count_points`, `first_palindrome`, `can_be_valid`,
  `reverse_string`, `reverse_words`, `to_lower_case`, `min_deletion_size`,
  `strong_password_checker_ii` and `array_strings_are_equal`.
- `kataset.trees`: the `TreeNode` dataclass (`val`, `left`, `right`) with
  `preorder_traversal` and `postorder_traversal`.

## Examples

```python
from kataset.arrays import two_sum, can_make_arithmetic_progression
from kataset.integers import maximum_69_number, number_of_matches
from kataset.strings import longest_common_prefix, square_is_white
from kataset.trees import TreeNode, preorder_traversal

two_sum([2, 7, 11, 15], 9)                          # [0, 1]
can_make_arithmetic_progression([3, 5, 1])          # True

maximum_69_number(9669)                             # 9969
number_of_matches(7)                                # 6

longest_common_prefix(["flower", "flow", "flight"]) # "fl"
square_is_white("h3")                               # True

root = TreeNode(1, None, TreeNode(2, TreeNode(3)))
preorder_traversal(root)                            # [1, 2, 3]
```

Checking a password against the strength rules (at least eight characters,
a lower-case letter, an upper-case letter, a digit, one of `!@#$%^&*()-+`,
and no two equal characters next to each other):

```python
from kataset.strings import strong_password_checker_ii

password = "password"
strong_password_checker_ii(password)                # False
```

## Errors

Inputs that a puzzle cannot be answered for raise `ValueError`, for example:

- `can_make_arithmetic_progression`, `max_product` and
  `max_product_difference` with fewer than two values;
- `find_gcd` with no values;
- `busy_student` when the start and end lists differ in length;
- `sum_of_unique` with a value outside `0..100`;
- `longest_common_prefix` and `min_deletion_size` with no strings, and
  `min_deletion_size` with strings of different lengths;
- `square_is_white` with fewer than two characters;
- `sort_sentence` when the sentence holds no numbered words;
- `can_be_valid` when the string and its lock mask differ in length.

## What it does not do

This is a library only: there is no command-line program, and nothing reads
puzzle input from files or standard input.

## Requirements

Python 3.10 or later. The package has no runtime dependencies; the `test`
extra brings in pytest for the test suite.