# algokit

Plain-Python solutions to classic algorithm problems over singly linked
lists, integer arrays, matrices, integers and strings. It has no runtime
dependencies and is used as a library: there is no command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.linked_list`: the `ListNode` dataclass (nodes compare by identity),
  `from_values` and `to_values` for building and reading lists, `reverse`
  (in place), `sort_list` (in place, by swapping values), `merge_nodes`,
  `merge_two_lists`, `is_palindrome`, `insert_greatest_common_divisors`,
  `double_it`, `add_two_numbers` (digits stored least significant first) and
  `spiral_matrix` (cells no value reaches hold `-1`).
- `algokit.arrays`: `two_sum` (raises `ValueError` when no pair fits),
  `max_area`, `smaller_numbers_than_current`, `running_sum`,
  `get_concatenation`, `gcd`, `find_gcd`, `remove_duplicates` and
  `remove_element` (both change the list in place and return its new length),
  `search_range`, `search_insert`, `find_median_sorted_arrays`,
  `daily_temperatures`, `num_rescue_boats`.
- `algokit.matrix`: `diagonal_sum`, `maximum_wealth`, `spiral_order`,
  `generate_matrix`.
- `algokit.array_ops`: `add_to_array_form`, `left_right_difference`,
  `count_fair_pairs`, `count_pairs`, `find_max_k`, `difference_of_sum`,
  `max_value`, `kids_with_candies`, `find_relative_ranks`, `word_count`,
  `most_words_found`.
- `algokit.numbers`: `tribonacci`, `digit_product`, `digit_sum`,
  `subtract_product_and_sum`, `number_of_steps`, `count_operations`,
  `is_strictly_palindromic`, `smallest_even_multiple`, `pivot_integer`,
  `count_digits`, `sum_of_multiples`, `concatenate`, `difference_of_sums`,
  `sum_of_the_digits_of_harshad_number`, `get_sum`, `my_pow`,
  `reverse_integer` (0 when the result leaves the 32-bit range),
  `reverse_digits`, `is_prime` (raises `ValueError` below 2), `factors`,
  `kth_factor`.
- `algokit.strings`: `is_palindrome`, `compare_version`, `reverse_prefix`,
  `final_value_after_operations`, `is_valid_parentheses`, `to_postfix`,
  `calculate` (single-digit operands, `/` and `%` truncate toward zero),
  `score_of_string`, `is_valid_word`, `to_lower_case`, `cal_points`.

Invalid input raises `ValueError` where a function cannot give an answer.

## Example

```python
from algokit.linked_list import from_values, to_values, add_two_numbers
from algokit.matrix import generate_matrix, spiral_order
from algokit.array_ops import find_relative_ranks
from algokit.numbers import kth_factor
from algokit.strings import calculate, compare_version

to_values(add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4])))  # [7, 0, 8]

generate_matrix(3)                               # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]

find_relative_ranks([10, 3, 8, 9, 4])
# ['Gold Medal', '5', 'Bronze Medal', 'Silver Medal', '4']

kth_factor(12, 3)          # 3
calculate("(2+3)*4")       # 20
compare_version("0.1", "1.1")  # -1
```

## What it does not cover

The package has no binary tree type and no tree algorithms (traversals,
depth, level sums and the like). Its data structures are limited to
singly linked lists and plain Python lists.