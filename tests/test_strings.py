import pytest

from integral.strings import (
    bool_to_string,
    remove_whitespace,
    split_string,
    string_to_bool,
    to_lowercase,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("a,,b", ["a", "", "b"]),
        ("a,b,", ["a", "b"]),
        (",a", ["", "a"]),
        ("", []),
    ],
)
def test_split_string(text, expected):
    assert split_string(text, ",") == expected


def test_split_perft_record():
    fields = split_string("8/8/8/8/8/K7/P7/k7 w - - 0 1 ;D1 3 ;D2 7", ";")
    assert fields == ["8/8/8/8/8/K7/P7/k7 w - - 0 1 ", "D1 3 ", "D2 7"]


def test_remove_whitespace():
    assert remove_whitespace(" f1f4 \t\n") == "f1f4"
    assert remove_whitespace("a b\vc\fd\re") == "abcde"


def test_to_lowercase():
    assert to_lowercase("Hash") == "hash"


def test_bool_round_trip():
    assert string_to_bool(bool_to_string(True)) is True
    assert string_to_bool(bool_to_string(False)) is False
    assert bool_to_string(True) == "true"


def test_string_to_bool_case_insensitive_and_strict():
    assert string_to_bool("TRUE") is True
    assert string_to_bool("yes") is False