"""Version sorting: compares strings so that embedded numbers order by value.

Digit runs compare numerically; among equal values, the run with more
leading zeroes sorts first. An underscore sorts before every other
character except a space.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

_DIGITS = frozenset("0123456789")


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def _is_digit(char: str | None) -> bool:
    return char is not None and char in _DIGITS


class _Cursor:
    """A peekable position inside a string."""

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def next(self) -> str | None:
        char = self.peek()
        if char is not None:
            self._pos += 1
        return char

    def next_digit(self) -> str | None:
        char = self.peek()
        if _is_digit(char):
            self._pos += 1
            return char
        return None

    def skip_zeroes(self) -> int:
        count = 0
        while self.peek() == "0":
            self._pos += 1
            count += 1
        return count


def _compare_underscore_to(char: str) -> int:
    if char == " ":
        return 1
    if char == "_":
        return 0
    return -1


def _compare_digits(a: _Cursor, b: _Cursor) -> int:
    """Compare the digit runs at both cursors by numeric value."""
    value_ord = 0
    while True:
        a_digit = a.next_digit()
        b_digit = b.next_digit()
        if a_digit is not None and b_digit is not None:
            value_ord = value_ord or _cmp(a_digit, b_digit)
            continue
        return _cmp(a_digit is not None, b_digit is not None) or value_ord


def version_sorting(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
    a_chars = _Cursor(a)
    b_chars = _Cursor(b)
    leading_zeroes = 0

    while True:
        if _is_digit(a_chars.peek()) and _is_digit(b_chars.peek()):
            a_zeroes = a_chars.skip_zeroes()
            b_zeroes = b_chars.skip_zeroes()
            leading_zeroes = leading_zeroes or -_cmp(a_zeroes, b_zeroes)
            result = _compare_digits(a_chars, b_chars)
            if result:
                return result
            continue

        a_char = a_chars.next()
        b_char = b_chars.next()
        if a_char is None or b_char is None:
            return _cmp(a_char is not None, b_char is not None) or leading_zeroes

        if a_char == "_":
            result = _compare_underscore_to(b_char)
        elif b_char == "_":
            result = -_compare_underscore_to(a_char)
        else:
            result = _cmp(a_char, b_char)
        if result:
            return result


def sorted_versions(items: Iterable[str]) -> list[str]:
    """Return the items as a new list in version order."""
    return sorted(items, key=cmp_to_key(version_sorting))