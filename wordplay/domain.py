"""
Core value objects for wordplay.

Domain Objects:
    MatchMode        — How unscramble verifies a candidate
    DictionaryEntry  — A dictionary word paired with its fingerprint
    GridMatch        — Where a word was found in a word search grid
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .fingerprint import same_letter_counts, same_letters, sum_characters


# =============================================================================
# MATCH MODE
# =============================================================================

class MatchMode(Enum):
    """
    Letter check applied to candidates that share the input's fingerprint.

    CHARSET: both words contain the same set of letters (counts ignored)
    STRICT:  both words contain the same letters the same number of times
    """
    CHARSET = "charset"
    STRICT = "strict"

    def matches(self, candidate: str, word: str) -> bool:
        if self is MatchMode.STRICT:
            return same_letter_counts(candidate, word)
        return same_letters(candidate, word)


# =============================================================================
# DICTIONARY ENTRY
# =============================================================================

@dataclass(frozen=True, order=True)
class DictionaryEntry:
    """
    One word of the dictionary index.

    Entries compare and order by fingerprint, never by word, so two
    anagrams are equal entries. Several entries may share a fingerprint.
    """
    fingerprint: int
    word: str = field(compare=False)

    @classmethod
    def from_word(cls, word: str) -> DictionaryEntry:
        """Create an entry, computing the fingerprint from the word."""
        return cls(word=word, fingerprint=sum_characters(word))

    def __len__(self) -> int:
        return len(self.word)


# =============================================================================
# GRID MATCH
# =============================================================================

@dataclass(frozen=True)
class GridMatch:
    """
    Location of a word in a word search grid.

    (x, y) is the column and row of the first symbol; (dx, dy) is the
    step between consecutive symbols, each in {-1, 0, 1}.
    """
    x: int
    y: int
    dx: int
    dy: int

    @property
    def start(self) -> tuple[int, int]:
        return (self.x, self.y)
