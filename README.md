# tpestructuras

Data-structure exercises written as plain Python functions.

- `tpestructuras.recursion`: division by successive subtraction with 1 to 10
  decimal places (`integer_division`, `decimal_digits`, `divide`), thousands
  separators for a digit string (`thousands_separator`), drawing a digital
  wave from an `L`/`H` signal (`digital_wave`), subsets that add up to a
  target (`subsets_summing`, `format_subsets`), the divisibility-by-7 rule
  (`divisible_by_7`) and the "explosive number" split (`explosion`).
- `tpestructuras.lists`: `KeyList`, an ordered list of `Element` objects
  (an integer `key` with an optional `value`) holding at most 100 elements,
  with 1-based positions. Adding to a full list raises `ListFullError`;
  `get` and `delete_at` raise `IndexError` for a position out of range, and
  `insert` past the end appends and returns `False`.
- `tpestructuras.list_exercises`: exercises built on `KeyList`:
  `unique_to_first`, `common_elements`, `average`, `minimum_values`
  (returns a `MinimumResult`), `multiple` (returns a `MultipleResult`),
  `compare_lists` (returns `FIRST_GREATER`, `SECOND_GREATER` or `EQUAL`),
  `evaluate_polynomial`, `polynomial_range` and `is_sublist`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from tpestructuras.recursion import divide, thousands_separator, explosion, divisible_by_7
from tpestructuras.lists import Element, KeyList
from tpestructuras.list_exercises import common_elements, evaluate_polynomial

divide(10, 3, 4)               # "3.3333"
thousands_separator("1234567") # "1.234.567"
explosion(10, 3)               # [3, 2, 1, 1, 3]
divisible_by_7(32291)          # True

first = KeyList([Element(1), Element(2), Element(3)])
second = KeyList([Element(2), Element(3), Element(4)])
common_elements(first, second).keys()  # [2, 3]

# Polynomial terms: exponent as key, coefficient as value.
poly = KeyList([Element(0, 1.0), Element(2, 3.0)])
evaluate_polynomial(poly, 2.0)         # 13.0
```

Invalid input raises an exception: for example `divide` raises `ValueError`
for a precision outside 1 to 10, and `thousands_separator` raises
`ValueError` for text that is not all digits.

## What this package does not do

There are no console commands or interactive menus, and no helpers that
prompt for and validate keyboard input. Everything is reached by importing
the modules and calling their functions.