"""
Letter fingerprints and letter comparisons.

All functions are pure and case-insensitive. A fingerprint is the sum of
the lowercase character codes of a word, so every anagram of a word has
the same fingerprint (the reverse does not hold).
"""

from __future__ import annotations

from collections import Counter


def sum_characters(word: str) -> int:
    """Return the sum of the lowercase character codes in word."""
    return sum(ord(ch) for ch in word.lower())


def has_letter(ch: str, word: str) -> bool:
    """Return True if word contains ch, ignoring case."""
    return ch.lower() in word.lower()


def same_letters(a: str, b: str) -> bool:
    """
    Two-way containment check on the letters of a and b.

    Every letter of a must appear somewhere in b and every letter of b
    somewhere in a. Letter counts are NOT compared: "aabcc" and "abbbc"
    have the same letters.
    """
    return all(has_letter(ch, b) for ch in a) and all(has_letter(ch, a) for ch in b)


def same_letter_counts(a: str, b: str) -> bool:
    """Return True if a and b use exactly the same letters the same number of times."""
    return Counter(a.lower()) == Counter(b.lower())
