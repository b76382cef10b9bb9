"""
Dictionary Index — fingerprint-sorted word list for unscrambling.

Every word is stored next to its fingerprint (the sum of its lowercase
character codes) and the entries are sorted by fingerprint. A query
computes the input's fingerprint, binary searches for the first entry
with that fingerprint, and scans forward over the run of equal
fingerprints checking length and letters.

The index is built once and never mutated afterwards, so any number of
queries may run against it.
"""

from __future__ import annotations

import bisect
import logging
from typing import Iterable, Iterator

from ..domain import DictionaryEntry, MatchMode
from ..errors import DictionaryLoadError
from ..fingerprint import sum_characters

logger = logging.getLogger(__name__)


# =============================================================================
# LOADING
# =============================================================================

def read_words(path: str) -> list[str]:
    """
    Read every whitespace-delimited token of a word list.

    Raises:
        DictionaryLoadError: if the file cannot be opened or read
    """
    logger.debug("Opening word list %s", path)
    try:
        with open(path, "r", encoding="ascii", errors="replace") as fh:
            return fh.read().split()
    except OSError as e:
        raise DictionaryLoadError(path, e.strerror) from e


# =============================================================================
# DICTIONARY INDEX
# =============================================================================

class DictionaryIndex:
    """
    Read-only index of dictionary words sorted by fingerprint.

    Build with DictionaryIndex.build(path) or DictionaryIndex.from_words().
    """

    def __init__(self, entries: Iterable[DictionaryEntry]):
        self._entries: tuple[DictionaryEntry, ...] = tuple(sorted(entries))
        # Parallel key list for bisect
        self._fingerprints: tuple[int, ...] = tuple(
            entry.fingerprint for entry in self._entries
        )

    @classmethod
    def from_words(cls, words: Iterable[str]) -> DictionaryIndex:
        """Build an index from an iterable of words."""
        return cls(DictionaryEntry.from_word(word) for word in words)

    @classmethod
    def build(cls, path: str) -> DictionaryIndex:
        """
        Load a whitespace/newline delimited word list and index it.

        Args:
            path: Path to the word list

        Returns:
            The populated DictionaryIndex (possibly empty)

        Raises:
            DictionaryLoadError: if the path cannot be opened for reading
        """
        index = cls.from_words(read_words(path))
        logger.info("Loaded %d words from %s", len(index), path)
        return index

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[DictionaryEntry, ...]:
        return self._entries

    @property
    def fingerprints(self) -> tuple[int, ...]:
        return self._fingerprints

    def words(self) -> list[str]:
        """All indexed words in fingerprint order."""
        return [entry.word for entry in self._entries]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def candidates(self, word: str) -> list[DictionaryEntry]:
        """Entries sharing the fingerprint of word, in index order."""
        fingerprint = sum_characters(word)
        start = bisect.bisect_left(self._fingerprints, fingerprint)
        end = bisect.bisect_right(self._fingerprints, fingerprint, lo=start)
        return list(self._entries[start:end])

    def unscramble(self, word: str, mode: MatchMode = MatchMode.CHARSET) -> list[str]:
        """
        Find the dictionary words that are anagrams of word.

        A candidate must share word's fingerprint, have the same length
        and pass the letter check for mode. Results are in index order
        (by fingerprint), not alphabetical.

        Args:
            word: The scrambled input
            mode: Letter check to apply (CHARSET ignores letter counts)

        Returns:
            Matching dictionary words; empty if there are none
        """
        results = []
        candidates = self.candidates(word)

        for entry in candidates:
            if len(entry) != len(word):
                continue
            if mode.matches(entry.word, word):
                results.append(entry.word)

        logger.debug(
            "unscramble %r: %d candidates, %d matches",
            word, len(candidates), len(results),
        )
        return results
