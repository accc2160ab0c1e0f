"""Solutions to the list exercises: differences, averages, multiples, polynomials."""

from __future__ import annotations

from dataclasses import dataclass

from tpestructuras.lists import Element, KeyList

EQUAL = 0
FIRST_GREATER = 1
SECOND_GREATER = 2

NO_SCALAR = 1000
_RANGE_TOLERANCE = 0.0001


@dataclass(frozen=True)
class MinimumResult:
    """Smallest key of each list with its 1-based position (0 for an empty list)."""

    first_position: int = 0
    first_value: int = 0
    second_position: int = 0
    second_value: int = 0


@dataclass(frozen=True)
class MultipleResult:
    """Whether a list is a multiple of another, and by a single scalar."""

    is_multiple: bool = True
    is_scalar: bool = True
    scalar: int = NO_SCALAR


def _distinct_keys(first: KeyList, second: KeyList, *, present: bool) -> KeyList:
    wanted = set(second.keys())
    result = KeyList()
    seen: set[int] = set()
    for key in first.keys():
        if (key in wanted) == present and key not in seen:
            seen.add(key)
            result.append(Element(key))
    return result


def unique_to_first(first: KeyList, second: KeyList) -> KeyList:
    """Return the distinct keys of first that are not in second, in order."""
    return _distinct_keys(first, second, present=False)


def common_elements(first: KeyList, second: KeyList) -> KeyList:
    """Return the distinct keys of first that also appear in second, in order."""
    return _distinct_keys(first, second, present=True)


def average(values: KeyList) -> float:
    """Return the mean of the keys, or 0.0 for an empty list."""
    keys = values.keys()
    if not keys:
        return 0.0
    return sum(keys) / len(keys)


def _minimum(values: KeyList) -> tuple[int, int]:
    keys = values.keys()
    if not keys:
        return 0, 0
    position, value = min(enumerate(keys, start=1), key=lambda pair: pair[1])
    return position, value


def minimum_values(first: KeyList, second: KeyList) -> MinimumResult:
    """Return the smallest key of each list and where it first occurs."""
    first_position, first_value = _minimum(first)
    second_position, second_value = _minimum(second)
    return MinimumResult(first_position, first_value, second_position, second_value)


def multiple(first: KeyList, second: KeyList) -> MultipleResult:
    """Check whether each key of second is a multiple of the matching key of first.

    The result is scalar when every quotient equals the first one. When the
    first pair does not divide exactly, the scalar keeps its NO_SCALAR value.
    """
    if len(first) != len(second):
        raise ValueError("lists must have the same length")
    is_multiple = True
    is_scalar = True
    scalar = NO_SCALAR
    reference = 0
    for index, (a, b) in enumerate(zip(first.keys(), second.keys())):
        if a == 0:
            raise ZeroDivisionError("keys of the first list must not be zero")
        if b % a != 0:
            is_multiple = False
            is_scalar = False
            continue
        quotient = b // a
        if index == 0:
            reference = quotient
            scalar = quotient
        elif quotient != reference:
            is_scalar = False
    return MultipleResult(is_multiple, is_scalar, scalar)


def compare_lists(first: KeyList, second: KeyList) -> int:
    """Compare the lists position by position over their common length.

    Returns FIRST_GREATER if first wins more positions, SECOND_GREATER if
    second does, and EQUAL otherwise.
    """
    first_wins = second_wins = 0
    for a, b in zip(first.keys(), second.keys()):
        if a > b:
            first_wins += 1
        elif a < b:
            second_wins += 1
    if first_wins > second_wins:
        return FIRST_GREATER
    if second_wins > first_wins:
        return SECOND_GREATER
    return EQUAL


def evaluate_polynomial(polynomial: KeyList, x: float) -> float:
    """Evaluate a polynomial whose elements hold the exponent as key and coefficient as value."""
    return sum(float(term.value) * x**term.key for term in polynomial)


def polynomial_range(
    polynomial: KeyList, start: float, stop: float, step: float
) -> list[float]:
    """Evaluate the polynomial from start to stop (inclusive) in increments of step."""
    if step <= 0:
        raise ValueError("step must be positive")
    results: list[float] = []
    x = start
    while x <= stop + _RANGE_TOLERANCE:
        results.append(evaluate_polynomial(polynomial, x))
        x += step
    return results


def is_sublist(first: KeyList, second: KeyList) -> bool:
    """Return True if every key of second appears in first, in any order."""
    available = set(first.keys())
    return all(key in available for key in second.keys())