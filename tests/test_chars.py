import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_alnum_is_union_of_alpha_and_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)


@pytest.mark.parametrize("ch", ALL_ASCII)
def test_is_print_matches_python_printable(ch):
    assert is_print(ch) == ch.isprintable()


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("\u00e9") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print("\t") is False
    assert is_print(127) is False


def test_integer_input_accepted():
    assert is_alpha(ord("A")) is True
    assert is_digit(ord("9")) is True
    assert is_alpha(ord("1")) is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("\u00e9") is False
    assert is_alnum("\u00e9") is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", "+9 [`{@")
def test_non_letters_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_source_examples():
    assert to_upper("m") == "M"
    assert to_lower("M") == "m"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)