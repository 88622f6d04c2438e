"""Graduated leetspeak substitution.

Each entry of `LEET_RULES` holds the rules a level introduces. The table of a
level is the union of every rule up to and including it, so the set of
replaced letters only grows; a later rule may swap the replacement of a letter
an earlier level already covered. The resulting tables are PasswordMaker
Pro's.
"""

from functools import cache
from types import MappingProxyType
from typing import Mapping

from passmaker.entities import LeetWhen, Profile


LEET_RULES: tuple[Mapping[str, str], ...] = (
    # 1
    {"a": "4", "e": "3", "l": "1", "o": "0", "q": "9", "t": "7"},
    # 2
    {"i": "1", "s": "5", "z": "2"},
    # 3
    {"b": "8", "g": "6", "i": "'", "y": "'/"},
    # 4
    {"a": "@"},
    # 5
    {
        "b": "|3",
        "h": "#",
        "i": "!",
        "j": "7",
        "k": "|<",
        "p": "|>",
        "r": "|2",
        "s": "$",
        "v": "\\/",
    },
    # 6
    {"d": "|)", "e": "&", "f": "|=", "j": ",|"},
    # 7
    {
        "c": "[",
        "m": "^^",
        "n": "^/",
        "p": "|*",
        "s": "5",
        "u": "(_)",
        "w": "\\/\\/",
        "x": "><",
    },
    # 8
    {
        "b": "8",
        "c": "(",
        "h": "|-|",
        "j": "_|",
        "k": "|(",
        "m": "|\\/|",
        "n": "|\\|",
        "o": "()",
        "p": "|>",
        "q": "(,)",
        "s": "$",
        "t": "|",
        "u": "|_|",
        "w": "\\^/",
        "x": ")(",
        "z": '"/_',
    },
    # 9
    {"k": "|{", "l": "|_", "m": "/\\/\\"},
)

MAX_LEVEL = len(LEET_RULES)


@cache
def leet_table(level: int) -> Mapping[str, str]:
    if not 0 <= level <= MAX_LEVEL:
        raise ValueError(f"Unknown leet level: {level}")
    table: dict[str, str] = {}
    for rules in LEET_RULES[:level]:
        table.update(rules)
    return MappingProxyType(table)


@cache
def _translation(level: int) -> dict[int, str]:
    return str.maketrans(dict(leet_table(level)))


def leetify(text: str, level: int) -> str:
    """Apply the leet table of `level` to text.

    The whole text is lowercased before substitution, not per character, so
    context-dependent lowercasing such as Greek final sigma matches what
    PasswordMaker Pro produces.
    """
    if level == 0:
        return text
    return text.lower().translate(_translation(level))


def pre_leet_level(profile: Profile) -> int:
    match profile.leet_when:
        case LeetWhen.PRE | LeetWhen.BOTH:
            return profile.leet_level
        case _:
            return 0


def post_leet_level(profile: Profile) -> int:
    match profile.leet_when:
        case LeetWhen.POST | LeetWhen.BOTH:
            return profile.leet_level
        case _:
            return 0
