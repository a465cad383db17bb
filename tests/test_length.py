import pytest

from pwvalidator.length import (
    get_length,
    get_reversed_string,
    remove_more_than_two_from_sequence,
    remove_more_than_two_repeating_chars,
)


@pytest.mark.parametrize(
    "text, seq, expected",
    [
        ("12345678", "0123456789", "12"),
        ("abcqwertyabc", "qwertyuiop", "abcqwabc"),
        ("", "", ""),
        ("", "12345", ""),
    ],
)
def test_remove_more_than_two_from_sequence(text, seq, expected):
    assert remove_more_than_two_from_sequence(text, seq) == expected


def test_remove_from_sequence_keeps_unrelated_text():
    assert remove_more_than_two_from_sequence("xyz", "0123456789") == "xyz"


@pytest.mark.parametrize("text, expected", [("abcd", "dcba"), ("1234", "4321")])
def test_get_reversed_string(text, expected):
    assert get_reversed_string(text) == expected


def test_reversed_string_round_trip():
    assert get_reversed_string(get_reversed_string("héllo")) == "héllo"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("aaaa", "aa"),
        ("bbbbbbbaaaaaaaaa", "bbaa"),
        ("ab", "ab"),
        ("", ""),
    ],
)
def test_remove_repeating_chars(text, expected):
    assert remove_more_than_two_repeating_chars(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("aaaa", 2),
        ("11112222", 4),
        ("aa123456", 4),
        ("876543", 2),
        ("qwerty123456z", 5),
    ],
)
def test_get_length(text, expected):
    assert get_length(text) == expected


def test_get_length_counts_utf8_bytes():
    assert get_length("ü") == 2


def test_get_length_empty():
    assert get_length("") == 0