import string

import pytest

from sigtalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", list(string.digits + " @[`{\x00"))
def test_non_letters_are_not_alpha(c):
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True


@pytest.mark.parametrize("c", ["a", " ", "/", ":"])
def test_non_digits(c):
    assert is_digit(c) is False


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(-1, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_alnum_source_examples():
    assert is_alnum("a") is True
    assert is_alnum("5") is True
    assert is_alnum(" ") is False


def test_ascii_range():
    assert all(is_ascii(code) for code in range(128))
    assert is_ascii(-1) is False
    assert is_ascii(128) is False


def test_printable_range_matches_bounds():
    printable = [code for code in range(-5, 300) if is_print(code)]
    assert printable == list(range(ord(" "), ord("~") + 1))


def test_print_excludes_controls():
    assert is_print("\x7f") is False
    assert is_print("\t") is False
    assert is_print(" ") is True


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_upper_lower_round_trip(c):
    upper = to_upper(c)
    assert upper in string.ascii_uppercase
    assert to_lower(upper) == c


def test_case_conversion_source_examples():
    assert to_upper("a") == "A"
    assert to_lower("B") == "b"
    assert to_upper("5") == "5"
    assert to_lower("5") == "5"


def test_case_conversion_keeps_int_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(1000) == 1000


def test_non_letters_unchanged():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)