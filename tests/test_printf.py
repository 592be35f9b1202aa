import io

import pytest

from ftkit.printf import HEX_LOW, HEX_UP, change_base, format_string, print_formatted


@pytest.mark.parametrize("n", [1, 9, 15, 16, 255, 4096, 123456789, 2**64 - 1])
def test_change_base_round_trip(n):
    text = change_base(n, HEX_LOW)
    assert int(text, 16) == n
    assert text == text.lower()


@pytest.mark.parametrize("n", [10, 48879, 2**40 + 11])
def test_change_base_upper_matches_lower(n):
    assert change_base(n, HEX_UP) == change_base(n, HEX_LOW).upper()


def test_change_base_zero():
    assert change_base(0, HEX_LOW) == "0"


def test_change_base_other_digits():
    assert int(change_base(37, "01"), 2) == 37


def test_change_base_negative_raises():
    with pytest.raises(ValueError):
        change_base(-1, HEX_LOW)


def test_change_base_too_few_digits_raises():
    with pytest.raises(ValueError):
        change_base(5, "0")


def test_string_null():
    assert format_string("%s", None) == "(null)"


def test_string_plain():
    assert format_string("<%s>", "map") == "<map>"


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 5, -5, 45, 2147483647, -2147483647])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2**31) == format_string("%d", -(2**31))


def test_unsigned_of_minus_one():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 9, 10, 3000000000])
def test_unsigned_round_trip(n):
    assert int(format_string("%u", n)) == n


@pytest.mark.parametrize("n", [0, 45, 255, 65535, 2**32 - 1])
def test_hex_round_trip(n):
    low = format_string("%x", n)
    assert int(low, 16) == n
    assert low == low.lower()
    assert format_string("%X", n) == low.upper()


def test_pointer_null():
    assert format_string("%p", None) == "0x0"


def test_pointer_address():
    text = format_string("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_percent_literal():
    assert format_string("%%") == "%"


def test_char_conversion():
    assert format_string("%c%c", ord("Z"), "q") == "Zq"


def test_unknown_conversion_is_dropped_and_takes_no_argument():
    assert format_string("a%qb%d", 3) == "ab3"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_none_format_is_empty():
    assert format_string(None) == ""


def test_mixed_conversions():
    assert format_string("%s-%d", "x", 7) == "x-7"


def test_print_formatted_counts_and_writes():
    out = io.StringIO()
    count = print_formatted("moves: %d %s", 12, "ok", stream=out)
    assert out.getvalue() == format_string("moves: %d %s", 12, "ok")
    assert count == len(out.getvalue())


def test_print_formatted_none_format():
    out = io.StringIO()
    assert print_formatted(None, stream=out) == 0
    assert out.getvalue() == ""


def test_print_formatted_default_stdout(capsys):
    count = print_formatted("%s", "Error")
    assert capsys.readouterr().out == "Error"
    assert count == len("Error")