"""Solutions to the recursion exercises: division, separators, waves, subsets and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MIN_PLACES = 1
MAX_PLACES = 10

_LOW = "L"
_HIGH = "H"
_WAVE_GLYPHS = {_LOW: "_", _HIGH: "-"}
_EDGE = "|"


def integer_division(m: int, n: int) -> tuple[int, int]:
    """Divide m by n by repeated subtraction; return (quotient, remainder).

    A dividend smaller than the divisor gives a quotient of 0 and the dividend
    itself as remainder.
    """
    if n == 0:
        raise ZeroDivisionError("divisor must not be zero")
    if n < 0:
        raise ValueError("divisor must be positive")
    quotient = 0
    while m >= n:
        m -= n
        quotient += 1
    return quotient, m


def decimal_digits(remainder: int, n: int, places: int) -> str:
    """Return up to `places` decimal digits of remainder / n, by subtraction.

    Stops early as soon as the division becomes exact.
    """
    if n == 0:
        raise ZeroDivisionError("divisor must not be zero")
    if remainder == 0 or places <= 0:
        return ""
    remainder *= 10
    digit = 0
    while remainder >= n:
        remainder -= n
        digit += 1
    return str(digit) + decimal_digits(remainder, n, places - 1)


def divide(m: int, n: int, places: int) -> str:
    """Return m / n as text with at most `places` decimals (1 to 10)."""
    if not MIN_PLACES <= places <= MAX_PLACES:
        raise ValueError(f"places must be between {MIN_PLACES} and {MAX_PLACES}")
    quotient, remainder = integer_division(m, n)
    if remainder == 0:
        return str(quotient)
    return f"{quotient}.{decimal_digits(remainder, n, places)}"


def thousands_separator(digits: str) -> str:
    """Insert a '.' between every group of three digits, counting from the right."""
    if not all("0" <= ch <= "9" for ch in digits):
        raise ValueError(f"not a string of digits: {digits!r}")
    if len(digits) <= 3:
        return digits
    return f"{thousands_separator(digits[:-3])}.{digits[-3:]}"


def digital_wave(signal: str) -> str:
    """Draw a signal of 'L' and 'H' as '_' and '-', with '|' at each change."""
    invalid = set(signal) - {_LOW, _HIGH}
    if invalid:
        raise ValueError(f"signal may only hold 'L' and 'H', got {sorted(invalid)}")
    if not signal:
        return ""
    head, rest = signal[0], signal[1:]
    edge = _EDGE if rest and rest[0] != head else ""
    return _WAVE_GLYPHS[head] + edge + digital_wave(rest)


def subsets_summing(values: Sequence[int], target: int) -> list[tuple[int, ...]]:
    """Return the subsets of values whose elements add up to target.

    Subsets are found by backtracking, trying to include each element before
    leaving it out; a branch stops as soon as its sum reaches the target.
    """
    found: list[tuple[int, ...]] = []

    def backtrack(index: int, total: int, chosen: tuple[int, ...]) -> None:
        if total == target:
            found.append(chosen)
            return
        if index >= len(values) or total > target:
            return
        value = values[index]
        backtrack(index + 1, total + value, chosen + (value,))
        backtrack(index + 1, total, chosen)

    backtrack(0, 0, ())
    return found


def format_subsets(subsets: Iterable[Sequence[int]]) -> str:
    """Render subsets as '{a,b} {c} ', each followed by a space."""
    return "".join("{" + ",".join(map(str, subset)) + "} " for subset in subsets)


def divisible_by_7(n: int) -> bool:
    """Test divisibility by 7 by repeatedly subtracting twice the last digit."""
    if n < 70:
        return n % 7 == 0
    return divisible_by_7(n // 10 - 2 * (n % 10))


def explosion(n: int, bomb: int) -> list[int]:
    """Return the fragments of n blown up by bomb, left fragment first.

    A number greater than the bomb splits into n // bomb and n - n // bomb,
    and each part keeps splitting while it is greater than the bomb.
    """
    if bomb < 2:
        raise ValueError("bomb must be at least 2")
    fragments: list[int] = []
    pending = [n]
    while pending:
        current = pending.pop()
        if current <= bomb:
            fragments.append(current)
            continue
        left = current // bomb
        pending.append(current - left)
        pending.append(left)
    return fragments