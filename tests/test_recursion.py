import pytest

from tpestructuras.recursion import (
    decimal_digits,
    digital_wave,
    divide,
    divisible_by_7,
    explosion,
    format_subsets,
    integer_division,
    subsets_summing,
    thousands_separator,
)


@pytest.mark.parametrize("m,n", [(7, 2), (100, 7), (3, 5), (0, 4), (49, 7)])
def test_integer_division_invariant(m, n):
    quotient, remainder = integer_division(m, n)
    assert quotient * n + remainder == m
    assert 0 <= remainder < n


def test_integer_division_small_dividend_returns_it_as_remainder():
    assert integer_division(3, 5) == (0, 3)


def test_integer_division_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        integer_division(5, 0)


def test_integer_division_negative_divisor():
    with pytest.raises(ValueError):
        integer_division(5, -2)


def test_decimal_digits_zero_remainder_is_empty():
    assert decimal_digits(0, 7, 5) == ""


@pytest.mark.parametrize("remainder,n,places", [(1, 3, 5), (2, 7, 10), (1, 4, 10), (5, 6, 3)])
def test_decimal_digits_bounds(remainder, n, places):
    digits = decimal_digits(remainder, n, places)
    assert 1 <= len(digits) <= places
    scaled = remainder * 10 ** len(digits)
    assert int(digits) * n <= scaled < (int(digits) + 1) * n


def test_decimal_digits_stops_when_exact():
    digits = decimal_digits(1, 4, 10)
    assert len(digits) < 10
    assert (1 * 10 ** len(digits)) % 4 == 0


@pytest.mark.parametrize("m,n,places", [(10, 3, 3), (22, 7, 10), (1, 8, 5), (50, 9, 1)])
def test_divide_close_to_true_quotient(m, n, places):
    text = divide(m, n, places)
    assert abs(float(text) - m / n) < 10 ** -places
    if "." in text:
        assert len(text.split(".")[1]) <= places


def test_divide_exact_has_no_point():
    assert divide(42, 6, 4) == str(42 // 6)


def test_divide_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        divide(1, 0, 3)


@pytest.mark.parametrize("places", [0, 11, -1])
def test_divide_places_out_of_range(places):
    with pytest.raises(ValueError):
        divide(1, 3, places)


def test_thousands_separator_example():
    assert thousands_separator("1234567") == "1.234.567"


@pytest.mark.parametrize("digits", ["", "7", "123", "1234", "123456", "98765432109"])
def test_thousands_separator_groups(digits):
    result = thousands_separator(digits)
    assert result.replace(".", "") == digits
    groups = result.split(".")
    assert all(len(group) == 3 for group in groups[1:])
    assert 1 <= len(groups[0]) <= 3 or digits == ""


def test_thousands_separator_rejects_non_digits():
    with pytest.raises(ValueError):
        thousands_separator("12a4")


def test_digital_wave_example():
    assert digital_wave("LHL") == "_|-|_"


@pytest.mark.parametrize("signal", ["HHHHLLLLHHHHHLLHHLL", "L", "HHHH", "LHLHLH"])
def test_digital_wave_shape(signal):
    wave = digital_wave(signal)
    assert wave.count("_") == signal.count("L")
    assert wave.count("-") == signal.count("H")
    changes = sum(1 for a, b in zip(signal, signal[1:]) if a != b)
    assert wave.count("|") == changes
    assert not wave.endswith("|")


def test_digital_wave_empty():
    assert digital_wave("") == ""


def test_digital_wave_rejects_other_characters():
    with pytest.raises(ValueError):
        digital_wave("LXH")


def test_subsets_summing_example():
    assert subsets_summing([10, 3, 1, 7, 4, 2], 7) == [(3, 4), (1, 4, 2), (7,)]


def test_subsets_summing_sums_match():
    values = [5, 1, 2, 3, 4, 6]
    result = subsets_summing(values, 6)
    assert result
    for subset in result:
        assert sum(subset) == 6
        assert all(item in values for item in subset)


def test_subsets_summing_none_found():
    assert subsets_summing([10, 20], 7) == []


def test_format_subsets_example():
    assert format_subsets([(3, 4), (1, 4, 2), (7,)]) == "{3,4} {1,4,2} {7} "


def test_format_subsets_empty():
    assert format_subsets([]) == ""


def test_divisible_by_7_examples():
    assert divisible_by_7(32291) is True
    assert divisible_by_7(110) is False


@pytest.mark.parametrize("n", [0, 7, 14, 69, 70, 77, 343, 999999, 1000000, 700007])
def test_divisible_by_7_agrees_with_modulo(n):
    assert divisible_by_7(n) == (n % 7 == 0)


def test_explosion_examples():
    assert explosion(10, 3) == [3, 2, 1, 1, 3]
    assert explosion(20, 5) == [4, 3, 2, 2, 1, 1, 1, 1, 5]


def test_explosion_no_blast_when_not_greater():
    assert explosion(4, 4) == [4]


@pytest.mark.parametrize("n,bomb", [(99999, 1000), (1000, 2), (57, 9)])
def test_explosion_fragments_sum_to_number(n, bomb):
    fragments = explosion(n, bomb)
    assert sum(fragments) == n
    assert all(fragment <= bomb for fragment in fragments)


def test_explosion_rejects_small_bomb():
    with pytest.raises(ValueError):
        explosion(10, 1)