import string

import pytest

from cstrkit.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " \t"))
def test_non_letters_are_not_alpha(ch):
    assert is_alpha(ch) is False


def test_digits_match_stdlib_set():
    digits = {chr(c) for c in range(256) if is_digit(c)}
    assert digits == set(string.digits)


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_range_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_space_set_matches_whitespace():
    spaces = {chr(c) for c in range(256) if is_space(c)}
    assert spaces == set(" \t\n\v\f\r")


def test_to_upper_and_lower_on_strings():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("5") == "5"
    assert to_lower("!") == "!"


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(200) == 200


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


@pytest.mark.parametrize("bad", ["", "ab", 1.5, None, True])
def test_rejects_bad_input(bad):
    with pytest.raises(TypeError):
        is_alpha(bad)