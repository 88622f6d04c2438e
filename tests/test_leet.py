from string import ascii_lowercase

import pytest

from passmaker.entities import LeetWhen, Profile
from passmaker.leet import (
    MAX_LEVEL,
    leet_table,
    leetify,
    post_leet_level,
    pre_leet_level,
)


# PasswordMaker Pro's replacement for a..z at every level
REFERENCE_TABLES = {
    1: ["4", "b", "c", "d", "3", "f", "g", "h", "i", "j", "k", "1", "m", "n", "0", "p", "9", "r", "s", "7", "u", "v", "w", "x", "y", "z"],
    2: ["4", "b", "c", "d", "3", "f", "g", "h", "1", "j", "k", "1", "m", "n", "0", "p", "9", "r", "5", "7", "u", "v", "w", "x", "y", "2"],
    3: ["4", "8", "c", "d", "3", "f", "6", "h", "'", "j", "k", "1", "m", "n", "0", "p", "9", "r", "5", "7", "u", "v", "w", "x", "'/", "2"],
    4: ["@", "8", "c", "d", "3", "f", "6", "h", "'", "j", "k", "1", "m", "n", "0", "p", "9", "r", "5", "7", "u", "v", "w", "x", "'/", "2"],
    5: ["@", "|3", "c", "d", "3", "f", "6", "#", "!", "7", "|<", "1", "m", "n", "0", "|>", "9", "|2", "$", "7", "u", "\\/", "w", "x", "'/", "2"],
    6: ["@", "|3", "c", "|)", "&", "|=", "6", "#", "!", ",|", "|<", "1", "m", "n", "0", "|>", "9", "|2", "$", "7", "u", "\\/", "w", "x", "'/", "2"],
    7: ["@", "|3", "[", "|)", "&", "|=", "6", "#", "!", ",|", "|<", "1", "^^", "^/", "0", "|*", "9", "|2", "5", "7", "(_)", "\\/", "\\/\\/", "><", "'/", "2"],
    8: ["@", "8", "(", "|)", "&", "|=", "6", "|-|", "!", "_|", "|(", "1", "|\\/|", "|\\|", "()", "|>", "(,)", "|2", "$", "|", "|_|", "\\/", "\\^/", ")(", "'/", "\"/_"],
    9: ["@", "8", "(", "|)", "&", "|=", "6", "|-|", "!", "_|", "|{", "|_", "/\\/\\", "|\\|", "()", "|>", "(,)", "|2", "$", "|", "|_|", "\\/", "\\^/", ")(", "'/", "\"/_"],
}


def replaced_letters(level):
    table = leet_table(level)
    return frozenset(c for c in ascii_lowercase if table.get(c, c) != c)


@pytest.mark.parametrize("level", range(1, MAX_LEVEL + 1))
def test_cumulative_tables_match_reference(level):
    table = leet_table(level)
    assert [table.get(c, c) for c in ascii_lowercase] == REFERENCE_TABLES[level]


def test_replaced_letters_only_grow_with_level():
    previous = replaced_letters(0)
    assert previous == frozenset()
    for level in range(1, MAX_LEVEL + 1):
        current = replaced_letters(level)
        assert previous <= current
        previous = current
    assert previous == frozenset(ascii_lowercase)


def test_level_zero_is_identity():
    text = "Mixed CASE and Σymbols 123"
    assert leetify(text, 0) == text


@pytest.mark.parametrize(
    ("text", "level", "expected"),
    [
        ("Hello World", 1, "h3110 w0r1d"),
        ("Sizzle", 2, "512213"),
        ("baggy", 3, "8466'/"),
        ("aaa", 4, "@@@"),
        ("kim", 9, "|{!/\\/\\"),
        ("123-456", 9, "123-456"),
    ],
)
def test_leetify(text, level, expected):
    assert leetify(text, level) == expected


def test_leetify_lowercases_whole_text_for_final_sigma():
    # a per-character lowercase would give "σασ"
    assert leetify("ΣΑΣ", 1) == "σας"


def test_leetify_is_deterministic():
    text = "The quick brown fox jumps over the lazy dog"
    for level in range(MAX_LEVEL + 1):
        assert leetify(text, level) == leetify(text, level)


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        leet_table(MAX_LEVEL + 1)


@pytest.mark.parametrize(
    ("when", "pre", "post"),
    [
        (LeetWhen.NONE, 0, 0),
        (LeetWhen.PRE, 5, 0),
        (LeetWhen.POST, 0, 5),
        (LeetWhen.BOTH, 5, 5),
    ],
)
def test_leet_when_policy(when, pre, post):
    profile = Profile(leet_level=5, leet_when=when)
    assert pre_leet_level(profile) == pre
    assert post_leet_level(profile) == post
