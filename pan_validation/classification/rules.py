"""Structural rules for PAN numbers.

Every function here is total: any string, including the empty string or a
string of unexpected length, yields a definite boolean.
"""

import re

PREFIX_SLICE = slice(0, 5)
DIGITS_SLICE = slice(5, 9)

_PAN_PATTERN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")


def has_adjacent_repeat(value: str) -> bool:
    """Return True if any two consecutive characters are identical.

    >>> has_adjacent_repeat("AABCD")
    True
    >>> has_adjacent_repeat("ABCDE")
    False
    """
    for current, following in zip(value, value[1:]):
        if current == following:
            return True
    return False


def is_strict_ascending_sequence(value: str) -> bool:
    """Return True if every character is exactly one code point above the previous.

    Strings shorter than two characters are never a sequence.

    >>> is_strict_ascending_sequence("ABCDE")
    True
    >>> is_strict_ascending_sequence("AXDGE")
    False
    """
    if len(value) < 2:
        return False
    for current, following in zip(value, value[1:]):
        if ord(following) - ord(current) != 1:
            return False
    return True


def matches_pan_format(value: str) -> bool:
    """Return True if value is five A-Z letters, four digits, then one A-Z letter."""
    return _PAN_PATTERN.fullmatch(value) is not None
