"""Palindrome tests for word games."""

from __future__ import annotations

from itertools import accumulate


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same forward and backward.

    Letter case is ignored, as are non-letters.
    """
    letters = [_lower(ch) for ch in s if ch.isalpha()]
    return letters == letters[::-1]


def _lower(ch: str) -> str:
    lowered = ch.lower()
    return lowered[0] if lowered else ch


def is_palindrome_bytes(s: str) -> bool:
    """Compare the UTF-8 bytes of s at each character start with their mirror.

    A first attempt: correct for ASCII, wrong for accented letters, case and
    punctuation.
    """
    data = s.encode("utf-8")
    starts = accumulate((len(ch.encode("utf-8")) for ch in s[:-1]), initial=0) if s else ()
    return all(data[i] == data[len(data) - 1 - i] for i in starts)